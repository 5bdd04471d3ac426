"""Core Layer — pure target-resolution logic, no IO, no async, no framework.

Invariants:
    - No module in core/ imports from api/, schemas/, or infrastructure/
    - All functions are pure and deterministic
    - Shared state (feature matrix, baseline table) is immutable after construction

Design Decisions:
    - Functional core separated from imperative shell (ADR: ExMA impureim sandwich)
"""
