"""Errors raised while parsing cluster lines.

All parse failures descend from ``ParseError`` so that callers can catch
them in one place, while the subclass (or ``kind``) tells apart lines
that are simply not understood from failures that point at a bug in
the patterns themselves.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Flat classification of parse failures."""

    UNKNOWN_TYPE = "UnknownType"
    INVALID_CONTENT = "InvalidContent"
    MISSING_FIELD = "MissingField"
    INTERNAL_ERROR = "InternalError"

    @property
    def expected(self) -> bool:
        """True for failures that are common in a live feed."""
        return self in (ErrorKind.UNKNOWN_TYPE, ErrorKind.INVALID_CONTENT)


class ParseError(Exception):
    """Root of the parse error hierarchy."""

    kind: ErrorKind
    default_message = "Error while parsing"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        field: Optional[str] = None,
        raw: Optional[str] = None,
    ) -> None:
        super().__init__(message or self.default_message)
        self.field = field
        self.raw = raw

    @property
    def message(self) -> str:
        return str(self.args[0])


class UnknownTypeError(ParseError):
    """The line starts with no known spot prefix."""

    kind = ErrorKind.UNKNOWN_TYPE
    default_message = "Unknown type of spot"


class InvalidContentError(ParseError):
    """The content of the spot does not match the detected type."""

    kind = ErrorKind.INVALID_CONTENT
    default_message = "The content of the spot does not match the detected type"


class MissingFieldError(ParseError):
    """A required field has no corresponding capture."""

    kind = ErrorKind.MISSING_FIELD
    default_message = "Required field of the spot is missing"


class InternalParseError(ParseError):
    """A capture could not be converted to the field's type."""

    kind = ErrorKind.INTERNAL_ERROR
    default_message = "Internal error occurred while parsing"
