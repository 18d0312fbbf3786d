"""Field extraction for classified cluster lines.

``parse`` is the entry point of the package: it identifies the spot
type of a line, matches the whole line against that type's pattern and
builds the frozen record from the captures.  Builders read their fields
in declaration order, so the first failing field determines the error.
"""

from __future__ import annotations

import re
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Type

from pydantic import ValidationError

from dxclparser.errors import InternalParseError, InvalidContentError, ParseError
from dxclparser.models import DX, WCY, WWV, WX, Spot, SpotRecord, ToAll, ToLocal

from .classifier import classify
from .fields import (
    HOUR,
    U64,
    optional_int,
    optional_str,
    required_decimal,
    required_int,
    required_str,
)
from .patterns import SPOT_PATTERNS

Fields = Dict[str, Any]


def khz_to_hz(khz: Decimal) -> int:
    """Convert kHz to Hz, truncating any fraction of a Hz.

    Values too large to be carried exactly only ever land outside the
    u64 range, so the range check still rejects them.
    """
    hz = int(khz * 1000)
    if not U64.lo <= hz <= U64.hi:
        raise InternalParseError(f"Frequency {khz} kHz out of range", field="freq")
    return hz


def _build_dx(m: re.Match) -> Fields:
    return {
        "call_de": required_str(m, "call_de"),
        "call_dx": required_str(m, "call_dx"),
        "freq": khz_to_hz(required_decimal(m, "freq")),
        "utc": required_int(m, "utc"),
        "loc": optional_str(m, "loc"),
        "comment": optional_str(m, "comment"),
    }


def _build_wwv(m: re.Match) -> Fields:
    return {
        "call_de": required_str(m, "call_de"),
        "utc": required_int(m, "utc", HOUR),
        "sfi": required_int(m, "sfi"),
        "a": required_int(m, "a"),
        "k": required_int(m, "k"),
        "info1": required_str(m, "info1"),
        "info2": required_str(m, "info2"),
    }


def _build_wcy(m: re.Match) -> Fields:
    return {
        "call_de": required_str(m, "call_de"),
        "utc": required_int(m, "utc", HOUR),
        "k": required_int(m, "k"),
        "expk": required_int(m, "expk"),
        "a": required_int(m, "a"),
        "r": required_int(m, "r"),
        "sfi": required_int(m, "sfi"),
        "sa": required_str(m, "sa"),
        "gmf": required_str(m, "gmf"),
        "au": required_str(m, "au"),
    }


def _build_announcement(m: re.Match) -> Fields:
    # Shared by WX, To ALL and To LOCAL
    return {
        "call_de": required_str(m, "call_de"),
        "utc": optional_int(m, "utc"),
        "msg": optional_str(m, "msg"),
    }


BUILDERS: Mapping[Type[SpotRecord], Callable[[re.Match], Fields]] = MappingProxyType(
    {
        DX: _build_dx,
        WWV: _build_wwv,
        WCY: _build_wcy,
        WX: _build_announcement,
        ToAll: _build_announcement,
        ToLocal: _build_announcement,
    }
)


def extract(raw: str, cls: Type[SpotRecord]) -> Spot:
    """Match ``raw`` against the pattern of ``cls`` and build the record."""
    match = SPOT_PATTERNS[cls].fullmatch(raw)
    if match is None:
        raise InvalidContentError(raw=raw)

    try:
        fields = BUILDERS[cls](match)
    except ParseError as e:
        e.raw = raw
        raise

    try:
        return cls(**fields)
    except ValidationError as e:
        raise InternalParseError(
            f"{cls.tag()} record rejected its fields: {e}", raw=raw
        ) from e


def parse(raw: str) -> Spot:
    """Parse a spot received from a DX Cluster into a record.

    Args:
        raw: A single line, already cleaned from surrounding whitespace,
            newline and bell characters.

    Returns:
        The record of the variant selected by the line prefix.

    Raises:
        UnknownTypeError: No known prefix.
        InvalidContentError: Known prefix, but the line does not have the
            shape of that spot type.
        MissingFieldError: A required field had no capture.
        InternalParseError: A capture could not be converted to its type.
    """
    return extract(raw, classify(raw))
