"""Partner ORM: one row per partner logo shown on the site.

Invariants:
    - id is a UUID assigned on insert, exposed as "_id"
    - name, logo_src, website_url, alt_text are non-nullable text
    - order_index is a sort key only (indexed, not unique)
    - batch_position records the record's place in the replace/reset call that created it
"""

import uuid

from sqlalchemy import Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from catalog.db.base import Base, TimestampMixin


class Partner(TimestampMixin, Base):
    __tablename__ = "partners"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    logo_src: Mapped[str] = mapped_column(Text, nullable=False)
    website_url: Mapped[str] = mapped_column(Text, nullable=False)
    alt_text: Mapped[str] = mapped_column(Text, nullable=False)
    order_index: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, index=True,
    )
    batch_position: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
