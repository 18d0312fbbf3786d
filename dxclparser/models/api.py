"""Request bodies of the HTTP API."""

from typing import List

from pydantic import BaseModel, Field


class ParseRequest(BaseModel):
    """A single raw line, as received from the cluster."""

    raw: str = Field(..., description="Raw cluster line or RBN comment")


class BatchParseRequest(BaseModel):
    """Several raw lines, parsed independently."""

    lines: List[str] = Field(..., max_length=10_000)
