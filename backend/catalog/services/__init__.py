"""Services Layer: repository operations over the two persistence layouts.

Invariants:
    - One repository instance per request, bound to the request's AsyncSession
    - Repositories commit their own writes
"""
