"""Core Layer: pure logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Functions raise catalog errors, never return error sentinels
"""
