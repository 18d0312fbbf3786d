"""Helpers for turning named captures into typed field values."""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import NamedTuple, Optional

from dxclparser.errors import InternalParseError, MissingFieldError


class IntRange(NamedTuple):
    """Inclusive range of an integer field type."""

    name: str
    lo: int
    hi: int


U8 = IntRange("u8", 0, 0xFF)
U16 = IntRange("u16", 0, 0xFFFF)
I16 = IntRange("i16", -0x8000, 0x7FFF)
U64 = IntRange("u64", 0, 0xFFFF_FFFF_FFFF_FFFF)
HOUR = IntRange("hour", 0, 23)


def _capture(match: re.Match, name: str) -> Optional[str]:
    """Return the text of group ``name`` or ``None`` if it did not participate.

    A group name the pattern does not define is a bookkeeping mismatch
    between pattern and record, reported as a missing field.
    """
    try:
        return match.group(name)
    except IndexError:
        raise MissingFieldError(
            f"Pattern defines no capture for field {name!r}", field=name
        ) from None


def _to_int(text: str, name: str, bounds: IntRange) -> int:
    try:
        value = int(text)
    except ValueError:
        raise InternalParseError(
            f"Capture {text!r} of field {name!r} is not an integer", field=name
        ) from None
    if not bounds.lo <= value <= bounds.hi:
        raise InternalParseError(
            f"Value {value} of field {name!r} out of {bounds.name} range", field=name
        )
    return value


def required_str(match: re.Match, name: str) -> str:
    text = _capture(match, name)
    if text is None:
        raise MissingFieldError(field=name)
    return text


def optional_str(match: re.Match, name: str) -> Optional[str]:
    return _capture(match, name)


def required_int(match: re.Match, name: str, bounds: IntRange = U16) -> int:
    """Read a mandatory integer field.

    Missing captures raise ``MissingFieldError``; captures that do not
    convert, or fall outside ``bounds``, raise ``InternalParseError``.
    """
    text = required_str(match, name)
    return _to_int(text, name, bounds)


def optional_int(match: re.Match, name: str, bounds: IntRange = U16) -> Optional[int]:
    text = _capture(match, name)
    if text is None:
        return None
    return _to_int(text, name, bounds)


def required_decimal(match: re.Match, name: str) -> Decimal:
    """Read a mandatory decimal field exactly, without going through float."""
    text = required_str(match, name)
    try:
        value = Decimal(text)
    except InvalidOperation:
        value = None
    if value is None or not value.is_finite():
        raise InternalParseError(
            f"Capture {text!r} of field {name!r} is not a number", field=name
        )
    return value
