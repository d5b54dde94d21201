"""Pydantic Schemas: request/response contracts for the collection endpoints.

Invariants:
    - Input schemas validate at the system boundary (request bodies, seed files)
    - Response schemas expose the record identity as "_id"

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
