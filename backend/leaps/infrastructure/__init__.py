"""Infrastructure Layer — cross-cutting concerns (logging).

Invariants:
    - Infrastructure never imports from core/ domain logic

Design Decisions:
    - Kept separate from core so the pure layer stays free of handlers and formatters
"""
