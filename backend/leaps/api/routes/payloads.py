"""Payload Routes — expose the parse + transform pipeline over HTTP.

Invariants:
    - POST /to-storage accepts only API-shape (camelCase) envelopes
    - POST /to-api accepts only storage-shape (snake_case) envelopes
    - Invalid bodies return 400 via PayloadValidationError; handlers live in api/error_handlers.py

Design Decisions:
    - Body typed as dict: FastAPI rejects non-objects, core rejects everything else
    - Thin routes: parsing, logging and errors are owned by services/payload_intake.py
"""

from typing import Any

from fastapi import APIRouter, Body

from leaps.core.payload_base import to_wire
from leaps.schemas.payloads import PayloadEnvelopeResponse
from leaps.services.payload_intake import accept_api_payload, present_stored_payload

router = APIRouter(prefix="/api/v1/payloads", tags=["payloads"])


@router.post("/to-storage", response_model=PayloadEnvelopeResponse)
async def to_storage(body: dict[str, Any] = Body(...)):
    """API-shape envelope in, storage-shape envelope out."""
    return PayloadEnvelopeResponse(data=to_wire(accept_api_payload(body)))


@router.post("/to-api", response_model=PayloadEnvelopeResponse)
async def to_api(body: dict[str, Any] = Body(...)):
    """Storage-shape envelope in, API-shape envelope out."""
    return PayloadEnvelopeResponse(data=to_wire(present_stored_payload(body)))
