"""Infrastructure Layer — cross-cutting concerns (logging).

Invariants:
    - Infrastructure never imports from core/ domain logic

Design Decisions:
    - Kept separate from api/ so logging can be configured before the app starts
"""
