"""Blob Partner Routes: partners stored as one JSON string under the "partners" key.

Invariants:
    - GET returns the decoded value ([] when nothing is stored)
    - POST overwrites the whole value with the body and responds 201 {"partner": <stored string>}
    - PUT requires {"partners": [...]} (400 otherwise)
    - DELETE removes the key and reports {"deleted": 0|1}
    - Reset stores the branded partner list
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.api.routes.collection_helpers import get_seed_catalog, track_operation
from catalog.core.validate_records import extract_collection
from catalog.infrastructure.database import get_db
from catalog.services.blob_collection import BlobCollection, PARTNERS_KEY
from catalog.services.seed_catalog import SeedCatalog

router = APIRouter(prefix="/api/partners", tags=["partners"])


def _partners(db: AsyncSession) -> BlobCollection:
    return BlobCollection(db, PARTNERS_KEY, "partners")


@router.get("")
async def list_partners(db: AsyncSession = Depends(get_db)):
    with track_operation(
        "GET /api/partners", "Failed to fetch partners",
    ) as op:
        partners = await _partners(db).list_all()
        op.record_count = len(partners) if isinstance(partners, list) else 1
    return {"success": True, "partners": partners}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_partner(
    body: Any = Body(None), db: AsyncSession = Depends(get_db),
):
    """Store the body as the entire partners value (overwrites, never appends)."""
    with track_operation(
        "POST /api/partners", "Failed to create partner",
    ) as op:
        stored = await _partners(db).create_one(body)
        op.record_count = 1
    return {"success": True, "partner": stored}


@router.put("")
async def replace_partners(
    body: Any = Body(None), db: AsyncSession = Depends(get_db),
):
    with track_operation(
        "PUT /api/partners", "Failed to update partners",
    ) as op:
        partners = await _partners(db).replace_all(
            extract_collection(body, "partners"),
        )
        op.record_count = len(partners)
    return {"success": True, "partners": partners}


@router.delete("")
async def delete_partners(db: AsyncSession = Depends(get_db)):
    with track_operation(
        "DELETE /api/partners", "Failed to reset partners",
    ) as op:
        deleted = await _partners(db).delete_all()
        op.record_count = deleted
    return {"success": True, "deleted": deleted}


@router.post("/reset")
async def reset_partners(
    db: AsyncSession = Depends(get_db),
    seeds: SeedCatalog = Depends(get_seed_catalog),
):
    with track_operation(
        "POST /api/partners/reset", "Failed to reset partners",
    ) as op:
        partners = await _partners(db).reset_to_defaults(seeds.branded_partners)
        op.record_count = len(partners)
    return {
        "success": True,
        "message": "Partners reset to default data",
        "partners": partners,
    }
