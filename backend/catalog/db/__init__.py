"""Database Package: SQLAlchemy declarative Base and shared column mixins.

Invariants:
    - All sessions are async (AsyncSession)
    - Tables are created from Base.metadata at startup (no migrations)
"""
