"""ShopProduct ORM: one row per product card in the shop section.

Invariants:
    - id is a UUID assigned on insert, exposed as "_id"
    - title, description, logo_src, logo_alt are non-nullable text
    - order_index is a sort key only; batch_position breaks ties in insertion order
"""

import uuid

from sqlalchemy import Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from catalog.db.base import Base, TimestampMixin


class ShopProduct(TimestampMixin, Base):
    __tablename__ = "shop_products"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    logo_src: Mapped[str] = mapped_column(Text, nullable=False)
    logo_alt: Mapped[str] = mapped_column(Text, nullable=False)
    order_index: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, index=True,
    )
    batch_position: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
