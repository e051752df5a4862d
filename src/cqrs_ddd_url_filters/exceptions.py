"""URL filters package exceptions."""

from __future__ import annotations


class UrlFiltersError(Exception):
    """Root exception for the url-filters package."""


class ValidationError(UrlFiltersError):
    """Raised when a parsed filter mapping does not conform to its schema.

    Carries structured errors: ``{field: [messages]}``.
    """

    def __init__(self, errors: dict[str, list[str]] | str | None = None) -> None:
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = {}
        else:
            self.errors = errors
        super().__init__(str(self.errors))

    @property
    def fields(self) -> list[str]:
        """Names of the offending fields, in reporting order."""
        return list(self.errors)


class SchemaError(UrlFiltersError):
    """Raised when an object cannot be used as a filter schema."""


class DebounceCancelledError(UrlFiltersError):
    """Raised to pending callers of a cancelled or flushed debounced function."""

    def __init__(self, message: str = "Debounced function was cancelled") -> None:
        super().__init__(message)
