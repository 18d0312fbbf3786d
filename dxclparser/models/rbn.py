"""Pydantic model for Reverse Beacon Network decode metadata.

RBN spots are regular DX spots whose comment carries the skimmer's
decode: mode, signal strength and either the keying speed or the
locator of the spotted station.
"""

from __future__ import annotations

import json
from typing import Annotated, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .spot import U16

I16 = Annotated[int, Field(ge=-0x8000, le=0x7FFF)]


class RBN(BaseModel):
    """Decoded comment section of an RBN spot."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    mode: str  # CW, RTTY, FT8, ...
    db: I16  # Signal strength, may be negative
    speed: Optional[U16] = None
    speed_unit: Optional[Literal["WPM", "BPS"]] = None
    info: str  # e.g. "CQ", "NCDXF B"
    loc: Optional[str] = None

    def to_json(self) -> str:
        return json.dumps(self.model_dump())


def rbn_from_json(text: str) -> RBN:
    """Read an RBN record back from the output of ``RBN.to_json``."""
    try:
        return RBN.model_validate_json(text)
    except ValidationError as e:
        raise ValueError(f"invalid RBN payload: {e}") from e
