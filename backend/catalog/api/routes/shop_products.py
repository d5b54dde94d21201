"""Shop Product Routes: list, bulk-replace and reset for the records layout.

Invariants:
    - Success envelope uses the "products" key: {"success": true, "products": [...]}
    - PUT body: {"products": [...]}; a non-array value is a 400 and nothing is written
"""

from typing import Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.api.routes.collection_helpers import get_seed_catalog, track_operation
from catalog.core.validate_records import extract_collection
from catalog.infrastructure.database import get_db
from catalog.services.record_repository import SHOP_PRODUCTS, RecordRepository
from catalog.services.seed_catalog import SeedCatalog

router = APIRouter(prefix="/api/shop-products", tags=["shop-products"])


@router.get("")
async def list_shop_products(db: AsyncSession = Depends(get_db)):
    with track_operation(
        "GET /api/shop-products", "Failed to fetch shop products",
    ) as op:
        products = await RecordRepository(db, SHOP_PRODUCTS).list_ordered()
        op.record_count = len(products)
    return {"success": True, "products": SHOP_PRODUCTS.serialize(products)}


@router.put("")
async def replace_shop_products(
    body: Any = Body(None), db: AsyncSession = Depends(get_db),
):
    with track_operation(
        "PUT /api/shop-products", "Failed to update shop products",
    ) as op:
        products = await RecordRepository(db, SHOP_PRODUCTS).replace_all(
            extract_collection(body, "products"),
        )
        op.record_count = len(products)
    return {"success": True, "products": SHOP_PRODUCTS.serialize(products)}


@router.post("/reset")
async def reset_shop_products(
    db: AsyncSession = Depends(get_db),
    seeds: SeedCatalog = Depends(get_seed_catalog),
):
    with track_operation(
        "POST /api/shop-products/reset", "Failed to reset shop products",
    ) as op:
        products = await RecordRepository(db, SHOP_PRODUCTS).reset_to_defaults(
            seeds.shop_products,
        )
        op.record_count = len(products)
    return {"success": True, "products": SHOP_PRODUCTS.serialize(products)}
