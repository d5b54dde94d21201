"""Record Repository: list/replace/reset for the one-row-per-record layout.

Invariants:
    - list_ordered() sorts by order_index, ties broken by position in the creating batch
    - replace_all() validates the whole payload before deleting anything
    - Replace is delete-all (commit) then insert (commit): NOT atomic; a failure
      between the two commits leaves the collection empty
    - Inserted rows get fresh UUIDs and timestamps and are returned in insertion order

Design Decisions:
    - One generic repository parameterized by RecordCollection, two module-level instances
"""

import logging
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.validate_records import validate_records
from catalog.db.base import Base
from catalog.models.partner import Partner
from catalog.models.shop_product import ShopProduct
from catalog.schemas.partner import PartnerCreate, PartnerResponse
from catalog.schemas.shop_product import ShopProductCreate, ShopProductResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordCollection:
    """Binds an entity's ORM model to its schemas and client-facing label."""
    name: str
    label: str
    model: type[Base]
    create_schema: type[BaseModel]
    response_schema: type[BaseModel]

    def serialize(self, rows: list) -> list[dict]:
        return [
            self.response_schema.model_validate(row).model_dump(
                mode="json", by_alias=True,
            )
            for row in rows
        ]


PARTNERS = RecordCollection(
    name="partners", label="Partners", model=Partner,
    create_schema=PartnerCreate, response_schema=PartnerResponse,
)
SHOP_PRODUCTS = RecordCollection(
    name="shop_products", label="Products", model=ShopProduct,
    create_schema=ShopProductCreate, response_schema=ShopProductResponse,
)


class RecordRepository:
    """Repository operations for one RecordCollection on one AsyncSession."""

    def __init__(self, db: AsyncSession, collection: RecordCollection):
        self._db = db
        self._collection = collection

    async def list_ordered(self) -> list:
        model = self._collection.model
        result = await self._db.execute(
            select(model).order_by(model.order_index, model.batch_position),
        )
        return list(result.scalars().all())

    async def replace_all(self, records: Any) -> list:
        """Replace the collection with records; raises ValidationError before any write."""
        normalized = validate_records(
            records, self._collection.create_schema, self._collection.label,
        )
        return await self._replace(normalized)

    async def reset_to_defaults(self, seed: list[dict]) -> list:
        return await self._replace(seed)

    async def _replace(self, records: list[dict]) -> list:
        model = self._collection.model
        deleted = await self._db.execute(delete(model))
        await self._db.commit()
        logger.debug(
            f"Cleared {deleted.rowcount} rows from {self._collection.name}",
            extra={"collection": self._collection.name},
        )

        rows = [
            model(**fields, batch_position=position)
            for position, fields in enumerate(records)
        ]
        self._db.add_all(rows)
        await self._db.commit()
        return rows
