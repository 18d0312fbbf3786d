"""Spot type identification by literal line prefix."""

from __future__ import annotations

from typing import Tuple, Type

from dxclparser.errors import UnknownTypeError
from dxclparser.models import DX, WCY, WWV, WX, SpotRecord, ToAll, ToLocal

# Checked in order, first match wins.
PREFIXES: Tuple[Tuple[Tuple[str, ...], Type[SpotRecord]], ...] = (
    (("DX de",), DX),
    (("WWV de",), WWV),
    (("WCY de",), WCY),
    (("WX de",), WX),
    (("To ALL de",), ToAll),
    (("To LOCAL de", "To Local de"), ToLocal),
)


def classify(raw: str) -> Type[SpotRecord]:
    """Return the spot class a line nominally belongs to.

    Only the prefix is inspected; a line with a known prefix and a
    garbled body is still classified and fails later, during extraction.
    """
    for prefixes, cls in PREFIXES:
        if raw.startswith(prefixes):
            return cls
    raise UnknownTypeError(raw=raw)
