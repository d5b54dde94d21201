"""Catalog API Package: partners and shop products backend.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
