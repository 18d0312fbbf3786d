"""Model exports."""

from .rbn import RBN, rbn_from_json
from .spot import (
    DX,
    SPOT_TYPES,
    WCY,
    WWV,
    WX,
    Spot,
    SpotRecord,
    ToAll,
    ToLocal,
    spot_from_dict,
    spot_from_json,
)

__all__ = [
    "Spot",
    "SpotRecord",
    "DX",
    "WWV",
    "WCY",
    "WX",
    "ToAll",
    "ToLocal",
    "RBN",
    "SPOT_TYPES",
    "spot_from_dict",
    "spot_from_json",
    "rbn_from_json",
]
