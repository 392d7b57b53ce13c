"""Pydantic Schemas — response contracts for API endpoints.

Invariants:
    - Schemas describe the JSON surface; derivation lives in core/

Design Decisions:
    - Separate from core dataclasses: schemas are API contracts, core is domain logic
"""
