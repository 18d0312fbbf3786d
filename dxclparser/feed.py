"""Helpers for feeding raw cluster traffic through the parser.

The parser itself works on one clean line at a time and never logs.
This module is the caller side: it cleans raw lines as they come off a
telnet session or out of a log file, parses them in bulk, and reports
failures through the structured logger.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from dxclparser.errors import ParseError
from dxclparser.middleware.logging import log_debug, log_warning
from dxclparser.models import DX, RBN, Spot
from dxclparser.parser import parse, parse_rbn

BEL = "\x07"


def clean_line(raw: str) -> str:
    """Strip surrounding whitespace, line endings and trailing bell characters."""
    return raw.strip().rstrip(BEL + string.whitespace)


@dataclass(frozen=True)
class ParsedLine:
    """Outcome of parsing one line of a feed."""

    line_no: int
    raw: str
    spot: Optional[Spot] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_lines(lines: Iterable[str], start: int = 1) -> Iterator[ParsedLine]:
    """Clean and parse every line, yielding one ``ParsedLine`` per non-blank line.

    Lines that are simply not spots (unknown type, invalid content) are
    logged at debug level.  Missing fields and conversion failures hint
    at a pattern bug and are logged as warnings.
    """
    for line_no, line in enumerate(lines, start=start):
        raw = clean_line(line)
        if not raw:
            continue
        try:
            spot = parse(raw)
        except ParseError as e:
            if e.kind.expected:
                log_debug("spot_skipped", line_no=line_no, kind=e.kind.value)
            else:
                log_warning(
                    "spot_parse_anomaly",
                    line_no=line_no,
                    kind=e.kind.value,
                    field=e.field,
                    error=e.message,
                    raw=raw,
                )
            yield ParsedLine(line_no=line_no, raw=raw, error=e)
        else:
            yield ParsedLine(line_no=line_no, raw=raw, spot=spot)


def parse_file(
    path: Union[str, Path], encoding: str = "utf-8", errors: str = "replace"
) -> Iterator[ParsedLine]:
    """Parse a file of recorded cluster traffic line by line."""
    with open(path, "r", encoding=encoding, errors=errors) as f:
        yield from parse_lines(f)


def rbn_info(spot: Spot) -> Optional[RBN]:
    """Return the RBN decode of a DX spot, or ``None`` if it carries none."""
    if not isinstance(spot, DX) or spot.comment is None:
        return None
    try:
        return parse_rbn(spot.comment)
    except ParseError:
        return None


def describe(spot: Spot) -> str:
    """One-line human readable summary of a spot."""
    return f"Found a {spot.tag()} spot from {spot.call_de}"
