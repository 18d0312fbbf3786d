"""Pydantic models for parsed DX Cluster spots.

This module defines the six record types a cluster line can be parsed
into.  ``Spot`` is the closed union over them; every model is frozen so
that a parsed record cannot be changed after ``parse`` hands it out.
Field declaration order is significant because it is the order used by
the JSON exchange format.
"""

from __future__ import annotations

import json
from typing import Annotated, Dict, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

U16 = Annotated[int, Field(ge=0, le=0xFFFF)]
U64 = Annotated[int, Field(ge=0, le=0xFFFF_FFFF_FFFF_FFFF)]
Hour = Annotated[int, Field(ge=0, le=23)]


class SpotRecord(BaseModel):
    """Common base of all spot variants."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    call_de: str  # Call of the spotting station

    @classmethod
    def tag(cls) -> str:
        """Name of the variant as used in the exchange format."""
        return cls.__name__

    def to_dict(self) -> Dict[str, Dict[str, object]]:
        """Project the spot onto ``{"<Tag>": {field: value, ...}}``."""
        return {self.tag(): self.model_dump()}

    def to_json(self) -> str:
        """Convert the spot into its JSON exchange representation."""
        return json.dumps(self.to_dict())


class DX(SpotRecord):
    """DX spot: a station heard on a frequency."""

    call_dx: str  # Call of the target station
    freq: U64  # Frequency in Hz
    utc: U16  # HHMM
    loc: Optional[str] = None  # Locator of the spotter
    comment: Optional[str] = None


class WWV(SpotRecord):
    """WWV propagation report."""

    utc: Hour
    sfi: U16  # Solar flux index
    a: U16
    k: U16
    info1: str  # Conditions in the last 24 hours
    info2: str  # Forecast for the next 24 hours


class WCY(SpotRecord):
    """WCY propagation report as sent by DK0WCY."""

    utc: Hour
    k: U16
    expk: U16  # Expected K index
    a: U16
    r: U16  # Sunspot number
    sfi: U16
    sa: str  # Solar activity
    gmf: str  # Geomagnetic field
    au: str  # Aurora


class WX(SpotRecord):
    """Weather announcement."""

    utc: Optional[U16] = None
    msg: Optional[str] = None


class ToAll(SpotRecord):
    """Announcement addressed to all users of the cluster network."""

    utc: Optional[U16] = None
    msg: Optional[str] = None


class ToLocal(SpotRecord):
    """Announcement addressed to the users of the local node."""

    utc: Optional[U16] = None
    msg: Optional[str] = None


Spot = Union[DX, WWV, WCY, WX, ToAll, ToLocal]

SPOT_TYPES: Dict[str, Type[SpotRecord]] = {
    cls.tag(): cls for cls in (DX, WWV, WCY, WX, ToAll, ToLocal)
}


def spot_from_dict(data: object) -> Spot:
    """Rebuild a spot from its ``{"<Tag>": {...}}`` projection.

    Raises ``ValueError`` if the tag is unknown or the payload does not
    validate against the variant's model.
    """
    if not isinstance(data, dict) or len(data) != 1:
        raise ValueError("expected an object with exactly one variant tag")
    (tag, fields), = data.items()
    cls = SPOT_TYPES.get(tag)
    if cls is None:
        raise ValueError(f"unknown spot type: {tag!r}")
    try:
        return cls.model_validate(fields)
    except ValidationError as e:
        raise ValueError(f"invalid {tag} payload: {e}") from e


def spot_from_json(text: str) -> Spot:
    """Read a spot back from the output of ``to_json``."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"invalid JSON: {e}") from e
    return spot_from_dict(data)
