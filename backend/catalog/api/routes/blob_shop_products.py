"""Blob Shop Product Routes: shop products stored as one JSON string under "shop-products".

Invariants:
    - Response and PUT body key is "shopProducts"; POST responds 201 {"shopProduct": <stored string>}
    - DELETE removes the key and reports {"deleted": 0|1}
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.api.routes.collection_helpers import get_seed_catalog, track_operation
from catalog.core.validate_records import extract_collection
from catalog.infrastructure.database import get_db
from catalog.services.blob_collection import BlobCollection, SHOP_PRODUCTS_KEY
from catalog.services.seed_catalog import SeedCatalog

router = APIRouter(prefix="/api/shop-products", tags=["shop-products"])


def _shop_products(db: AsyncSession) -> BlobCollection:
    return BlobCollection(db, SHOP_PRODUCTS_KEY, "shopProducts")


@router.get("")
async def list_shop_products(db: AsyncSession = Depends(get_db)):
    with track_operation(
        "GET /api/shop-products", "Failed to fetch shop products",
    ) as op:
        products = await _shop_products(db).list_all()
        op.record_count = len(products) if isinstance(products, list) else 1
    return {"success": True, "shopProducts": products}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_shop_product(
    body: Any = Body(None), db: AsyncSession = Depends(get_db),
):
    with track_operation(
        "POST /api/shop-products", "Failed to create shop product",
    ) as op:
        stored = await _shop_products(db).create_one(body)
        op.record_count = 1
    return {"success": True, "shopProduct": stored}


@router.put("")
async def replace_shop_products(
    body: Any = Body(None), db: AsyncSession = Depends(get_db),
):
    with track_operation(
        "PUT /api/shop-products", "Failed to update shop products",
    ) as op:
        products = await _shop_products(db).replace_all(
            extract_collection(body, "shopProducts"),
        )
        op.record_count = len(products)
    return {"success": True, "shopProducts": products}


@router.delete("")
async def delete_shop_products(db: AsyncSession = Depends(get_db)):
    with track_operation(
        "DELETE /api/shop-products", "Failed to reset shop products",
    ) as op:
        deleted = await _shop_products(db).delete_all()
        op.record_count = deleted
    return {"success": True, "deleted": deleted}


@router.post("/reset")
async def reset_shop_products(
    db: AsyncSession = Depends(get_db),
    seeds: SeedCatalog = Depends(get_seed_catalog),
):
    with track_operation(
        "POST /api/shop-products/reset", "Failed to reset shop products",
    ) as op:
        products = await _shop_products(db).reset_to_defaults(
            seeds.branded_shop_products,
        )
        op.record_count = len(products)
    return {
        "success": True,
        "message": "Shop products reset to default data",
        "shopProducts": products,
    }
