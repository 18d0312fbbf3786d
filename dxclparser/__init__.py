"""Parser for spots received from amateur radio DX Clusters."""

from .errors import (
    ErrorKind,
    InternalParseError,
    InvalidContentError,
    MissingFieldError,
    ParseError,
    UnknownTypeError,
)
from .models import (
    DX,
    RBN,
    WCY,
    WWV,
    WX,
    Spot,
    ToAll,
    ToLocal,
    rbn_from_json,
    spot_from_json,
)
from .parser import parse, parse_rbn

__all__ = [
    "parse",
    "parse_rbn",
    "Spot",
    "DX",
    "WWV",
    "WCY",
    "WX",
    "ToAll",
    "ToLocal",
    "RBN",
    "spot_from_json",
    "rbn_from_json",
    "ErrorKind",
    "ParseError",
    "UnknownTypeError",
    "InvalidContentError",
    "MissingFieldError",
    "InternalParseError",
]
