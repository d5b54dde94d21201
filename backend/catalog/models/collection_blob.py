"""CollectionBlob ORM: a whole collection stored as one JSON string under a key.

Invariants:
    - key is unique ("partners" / "shop-products")
    - data is the raw stored string; callers decide how to encode/decode it
    - Rows carry no per-record identity or timestamps, only the blob's own
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from catalog.db.base import Base, TimestampMixin


class CollectionBlob(TimestampMixin, Base):
    __tablename__ = "collection_blobs"

    key: Mapped[str] = mapped_column(String(64), primary_key=True)
    data: Mapped[str] = mapped_column(Text, nullable=False)
