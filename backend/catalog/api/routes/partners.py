"""Partner Routes: list, bulk-replace and reset for the records layout.

Invariants:
    - Success envelope: {"success": true, "partners": [...]}
    - PUT body: {"partners": [...]}; a non-array value is a 400 and nothing is written
    - Reset replaces the collection with the partner seed list
"""

from typing import Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.api.routes.collection_helpers import get_seed_catalog, track_operation
from catalog.core.validate_records import extract_collection
from catalog.infrastructure.database import get_db
from catalog.services.record_repository import PARTNERS, RecordRepository
from catalog.services.seed_catalog import SeedCatalog

router = APIRouter(prefix="/api/partners", tags=["partners"])


@router.get("")
async def list_partners(db: AsyncSession = Depends(get_db)):
    """All partners ordered by order_index."""
    with track_operation(
        "GET /api/partners", "Failed to fetch partners",
    ) as op:
        partners = await RecordRepository(db, PARTNERS).list_ordered()
        op.record_count = len(partners)
    return {"success": True, "partners": PARTNERS.serialize(partners)}


@router.put("")
async def replace_partners(
    body: Any = Body(None), db: AsyncSession = Depends(get_db),
):
    """Replace every partner with the supplied list."""
    with track_operation(
        "PUT /api/partners", "Failed to update partners",
    ) as op:
        partners = await RecordRepository(db, PARTNERS).replace_all(
            extract_collection(body, "partners"),
        )
        op.record_count = len(partners)
    return {"success": True, "partners": PARTNERS.serialize(partners)}


@router.post("/reset")
async def reset_partners(
    db: AsyncSession = Depends(get_db),
    seeds: SeedCatalog = Depends(get_seed_catalog),
):
    with track_operation(
        "POST /api/partners/reset", "Failed to reset partners",
    ) as op:
        partners = await RecordRepository(db, PARTNERS).reset_to_defaults(
            seeds.partners,
        )
        op.record_count = len(partners)
    return {"success": True, "partners": PARTNERS.serialize(partners)}
