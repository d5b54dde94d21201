"""API Layer: FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in create_app() (no auto-discovery)
    - Every response body is JSON
"""
