"""Parser for the RBN decode carried in the comment of a DX spot."""

from __future__ import annotations

from dxclparser.errors import InvalidContentError, ParseError
from dxclparser.models import RBN

from .fields import I16, optional_int, optional_str, required_int, required_str
from .patterns import RBN_LOCATOR_PATTERN, RBN_SPEED_PATTERN


def parse_rbn(raw: str) -> RBN:
    """Parse the comment section of an RBN spot.

    Args:
        raw: The ``comment`` of a parsed DX spot, e.g.
            ``"CW     9 dB  21 WPM  NCDXF B"``.

    The speed layout is tried first, then the locator layout.  Either
    ``speed``/``speed_unit`` or ``loc`` is set on the result, never both.

    Raises:
        InvalidContentError: The comment matches neither layout.
    """
    try:
        m = RBN_SPEED_PATTERN.fullmatch(raw)
        if m is not None:
            return RBN(
                mode=required_str(m, "mode"),
                db=required_int(m, "db", I16),
                speed=optional_int(m, "speed"),
                speed_unit=optional_str(m, "speed_unit"),
                info=required_str(m, "info"),
            )

        m = RBN_LOCATOR_PATTERN.fullmatch(raw)
        if m is not None:
            return RBN(
                mode=required_str(m, "mode"),
                db=required_int(m, "db", I16),
                info=required_str(m, "info"),
                loc=optional_str(m, "loc"),
            )
    except ParseError as e:
        e.raw = raw
        raise

    raise InvalidContentError(
        "The comment is not a known RBN decode", raw=raw
    )
