"""Core Layer — pure payload contract logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - All functions are pure and deterministic; schemas and adapters are module constants

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
    - Registry → shapes → transforms: each layer imports only the ones before it
"""
