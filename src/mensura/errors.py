"""Errors raised when a single measurement token cannot be produced."""
from __future__ import annotations

__all__ = ["ParseError", "UnknownUnitError", "InfiniteNumberError"]


class ParseError(ValueError):
    """Terminal failure of one token attempt.

    A recognizer that simply does not match returns ``None``; this exception
    is reserved for input that matched a grammar but cannot yield a value.
    """


class UnknownUnitError(ParseError):
    """The unit word could not be resolved against the unit table."""

    def __init__(self, unit: str) -> None:
        super().__init__(f"Unknown unit: `{unit}`")
        self.unit = unit


class InfiniteNumberError(ParseError):
    """A rational literal had a zero denominator."""

    def __init__(self, raw: str | None = None) -> None:
        message = "Found an infinite number when parsing"
        if raw:
            message = f"{message}: {raw!r}"
        super().__init__(message)
        self.raw = raw
