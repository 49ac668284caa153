"""Services Layer — imperative shell around the pure payload core.

Invariants:
    - Services turn failed ParseResults into PayloadValidationError (the HTTP boundary)
    - Services log; core never does

Design Decisions:
    - One service module per flow (ADR: no god objects)
"""
