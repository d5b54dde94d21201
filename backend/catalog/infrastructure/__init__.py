"""Infrastructure Layer: database lifecycle and logging setup.

Invariants:
    - Storage failures surface as StorageError, never raw SQLAlchemy exceptions
"""
