"""Blob Collection: a whole collection stored as one JSON string under a fixed key.

Invariants:
    - Each write is a single-row upsert on key: atomic, no per-record identity
    - list_all() returns [] when the key is absent
    - create_one() overwrites the whole value (string bodies stored verbatim, others JSON-encoded)
    - create_one() stores a missing body as "{}" and decodes raw text bodies as UTF-8 (400 if invalid)
    - delete_all() returns the number of removed rows (0 or 1)
"""

import json
import logging
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.errors import ValidationError
from catalog.core.validate_records import require_list
from catalog.models.collection_blob import CollectionBlob

logger = logging.getLogger(__name__)

PARTNERS_KEY = "partners"
SHOP_PRODUCTS_KEY = "shop-products"


class BlobCollection:
    """Repository operations for one key of the collection_blobs table."""

    def __init__(self, db: AsyncSession, key: str, label: str):
        self._db = db
        self._key = key
        self._label = label

    async def list_all(self) -> Any:
        blob = await self._get()
        if blob is None:
            return []
        return json.loads(blob.data)

    async def replace_all(self, records: Any) -> list:
        items = require_list(records, self._label)
        await self._store(json.dumps(items))
        return items

    async def create_one(self, payload: Any) -> str:
        if payload is None:
            payload = {}
        elif isinstance(payload, bytes):
            try:
                payload = payload.decode("utf-8")
            except UnicodeDecodeError as e:
                raise ValidationError(
                    f"{self._label} body must be UTF-8 text",
                ) from e
        data = payload if isinstance(payload, str) else json.dumps(payload)
        await self._store(data)
        return data

    async def delete_all(self) -> int:
        result = await self._db.execute(
            delete(CollectionBlob).where(CollectionBlob.key == self._key),
        )
        await self._db.commit()
        return result.rowcount or 0

    async def reset_to_defaults(self, seed: list) -> list:
        await self._store(json.dumps(seed))
        return seed

    async def _get(self) -> CollectionBlob | None:
        result = await self._db.execute(
            select(CollectionBlob).where(CollectionBlob.key == self._key),
        )
        return result.scalar_one_or_none()

    async def _store(self, data: str) -> None:
        blob = await self._get()
        if blob is None:
            self._db.add(CollectionBlob(key=self._key, data=data))
        else:
            blob.data = data
        await self._db.commit()
        logger.debug(
            f"Stored {len(data)} chars under {self._key}",
            extra={"collection": self._key},
        )
