"""Pydantic Schemas — response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (API responses)
    - Domain types from core/ used for enum fields

Design Decisions:
    - Separate from core dataclasses: schemas are API contracts, core types are domain (ADR: DDD boundary)
"""
