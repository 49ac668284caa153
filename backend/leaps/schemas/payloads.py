"""Payload Route Schemas — response envelope for the transform endpoints.

Invariants:
    - Successful responses always carry success=True and the converted envelope under data
    - data is already in wire form (aliases applied, absent optionals omitted)

Design Decisions:
    - Request bodies are taken as raw dicts, not typed models: shape errors must come from
      the core parsers so the 400 body lists the same issues a direct parse would
"""

from typing import Any, Literal

from pydantic import BaseModel


class PayloadEnvelopeResponse(BaseModel):
    """Converted {activityCode, data} envelope."""
    success: Literal[True] = True
    data: dict[str, Any]
