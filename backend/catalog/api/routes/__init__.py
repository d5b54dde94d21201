"""Route Modules: one file per collection and storage layout.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never contain persistence logic (delegate to services/)

Design Decisions:
    - records_* and blob_* routers share paths; create_app() mounts one family only
"""
