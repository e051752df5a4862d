"""Debounced wrappers: collapse bursts of calls into one trailing execution."""

from __future__ import annotations

import asyncio
import functools
import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .builder import build_query
from .exceptions import DebounceCancelledError
from .parser import parse_query
from .urls import build_url

if TYPE_CHECKING:
    from collections.abc import Callable

    from .query_params import QueryParams

logger = logging.getLogger("cqrs_ddd.url_filters.debounce")

R = TypeVar("R")

DEFAULT_DELAY = 0.3


class DebouncedFunction(Generic[R]):
    """
    Trailing-edge debounce around a synchronous function.

    Every call restarts a single timer on the running event loop and
    returns a future. When the timer fires, the function runs once with the
    arguments of the last call, and every pending future gets that same
    result or exception.

    Usage::

        parse = debounce(functools.partial(parse_query, ProductFilters), 0.2)
        first = parse("?search=a")
        second = parse("?search=ab")
        await asyncio.gather(first, second)  # both see the "ab" result
    """

    def __init__(self, func: Callable[..., R], delay: float = DEFAULT_DELAY) -> None:
        if delay < 0:
            raise ValueError("delay must be >= 0")
        self._func = func
        self._delay = delay
        self._handle: asyncio.TimerHandle | None = None
        self._pending: list[asyncio.Future[R]] = []

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def pending(self) -> int:
        """Number of callers waiting on the next execution."""
        return len(self._pending)

    def __call__(self, *args: Any, **kwargs: Any) -> asyncio.Future[R]:
        """Schedule a call; must be invoked from a running event loop."""
        loop = asyncio.get_running_loop()
        if self._handle is not None:
            self._handle.cancel()
        future: asyncio.Future[R] = loop.create_future()
        self._pending.append(future)
        self._handle = loop.call_later(self._delay, self._fire, args, kwargs)
        logger.debug(
            "Debounce timer (re)started for %d caller(s)", len(self._pending)
        )
        return future

    def cancel(self) -> None:
        """Clear the timer and fail every pending caller."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        pending, self._pending = self._pending, []
        if pending:
            logger.info("Cancelling %d pending debounced call(s)", len(pending))
        for future in pending:
            if not future.done():
                future.set_exception(DebounceCancelledError())

    def flush(self, *args: Any, **kwargs: Any) -> R:
        """Cancel pending callers and run the function now with these arguments."""
        self.cancel()
        return self._func(*args, **kwargs)

    def _fire(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        self._handle = None
        pending, self._pending = self._pending, []
        try:
            result = self._func(*args, **kwargs)
        except Exception as exc:
            for future in pending:
                if not future.done():
                    future.set_exception(exc)
            return
        for future in pending:
            if not future.done():
                future.set_result(result)


def debounce(
    func: Callable[..., R], delay: float = DEFAULT_DELAY
) -> DebouncedFunction[R]:
    """Wrap *func* in a :class:`DebouncedFunction`."""
    return DebouncedFunction(func, delay)


def create_debounced_parse_query(
    schema: Any, delay: float = DEFAULT_DELAY
) -> DebouncedFunction[dict[str, Any]]:
    """Debounced ``parse_query(schema, source, options=None)``."""
    return debounce(functools.partial(parse_query, schema), delay)


def create_debounced_build_query(
    schema: Any, delay: float = DEFAULT_DELAY
) -> DebouncedFunction[QueryParams]:
    """Debounced ``build_query(schema, filters, options=None)``."""
    return debounce(functools.partial(build_query, schema), delay)


def create_debounced_build_url(
    schema: Any, delay: float = DEFAULT_DELAY
) -> DebouncedFunction[str]:
    """Debounced ``build_url(base_url, schema, filters, options=None)``."""

    def _build(base_url: str, filters: Any, options: Any = None) -> str:
        return build_url(base_url, schema, filters, options)

    return debounce(_build, delay)
