"""Pydantic Schemas — request/response shapes for API endpoints.

Invariants:
    - Schemas describe the HTTP envelope only; payload rules live in core/

Design Decisions:
    - Separate from core: schemas are transport contracts, core shapes are domain values
      (ADR: DDD boundary)
"""
