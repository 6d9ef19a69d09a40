"""Pydantic Schemas — validation of caller-supplied data at the record service boundary.

Invariants:
    - Schemas validate before any storage mutation (validate-then-write)
    - Domain types from core/ used for enum fields
    - Unknown fields are allowed and passed through to the document

Design Decisions:
    - Separate from models: schemas are caller contracts, models are persistence
"""
