# errors.py
"""Error kinds raised by the country lookup service.

Each one also subclasses the matching builtin so callers that only know
about ``ValueError``/``LookupError`` still catch them.
"""

from __future__ import annotations


class CountriesError(Exception):
    """Base class for every lookup failure."""


class InvalidArgument(CountriesError, ValueError):
    def __init__(self, argument: str, value) -> None:
        self.argument = argument
        self.value = value
        super().__init__(f"Invalid argument {argument}: {value!r}")


class NotFound(CountriesError, LookupError):
    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"No country with code {code!r}")


class QueryError(CountriesError, RuntimeError):
    """The store failed to execute a read (not the same as zero rows)."""

    def __init__(self, message: str = "Error executing SQL query") -> None:
        super().__init__(message)


__all__ = ["CountriesError", "InvalidArgument", "NotFound", "QueryError"]
