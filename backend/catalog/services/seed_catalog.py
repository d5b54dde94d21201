"""Seed Catalog: default collection contents loaded from JSON assets.

Invariants:
    - Loaded once per app; every seed file must be a JSON array
    - Record-layout seeds are validated through the entity schemas at load time
    - Branded (blob-layout) seeds are stored verbatim, so they are only checked to be arrays
    - Any missing or malformed file raises StartupError

Design Decisions:
    - Packaged defaults live in catalog/data/seeds; SEED_DIR overrides them file by file
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel

from catalog.core.errors import StartupError, ValidationError, ErrorContext
from catalog.core.validate_records import validate_records, require_list
from catalog.schemas.partner import PartnerCreate
from catalog.schemas.shop_product import ShopProductCreate

logger = logging.getLogger(__name__)

PACKAGED_SEED_DIR = Path(__file__).resolve().parent.parent / "data" / "seeds"


@dataclass(frozen=True)
class SeedCatalog:
    """Default contents per collection and layout."""
    partners: list[dict]
    shop_products: list[dict]
    branded_partners: list
    branded_shop_products: list


def load_seed_catalog(seed_dir: str | Path | None = None) -> SeedCatalog:
    """Load every seed file, preferring seed_dir over the packaged defaults."""
    catalog = SeedCatalog(
        partners=_load_records(seed_dir, "partners.json", PartnerCreate, "Partners"),
        shop_products=_load_records(
            seed_dir, "shop_products.json", ShopProductCreate, "Products",
        ),
        branded_partners=_load_list(seed_dir, "branded_partners.json"),
        branded_shop_products=_load_list(seed_dir, "branded_shop_products.json"),
    )
    logger.info(
        f"Seed catalog loaded: {len(catalog.partners)} partners, "
        f"{len(catalog.shop_products)} shop products",
    )
    return catalog


def _resolve(seed_dir: str | Path | None, filename: str) -> Path:
    if seed_dir is not None:
        candidate = Path(seed_dir) / filename
        if candidate.is_file():
            return candidate
    return PACKAGED_SEED_DIR / filename


def _read_json(path: Path):
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise StartupError(
            f"Cannot read seed file {path.name}",
            ErrorContext(debug_info={"cause": str(e), "path": str(path)}),
        ) from e


def _load_list(seed_dir: str | Path | None, filename: str) -> list:
    path = _resolve(seed_dir, filename)
    try:
        return require_list(_read_json(path), filename)
    except ValidationError as e:
        raise StartupError(f"Seed file {path.name} is invalid: {e.message}") from e


def _load_records(
    seed_dir: str | Path | None, filename: str,
    schema: type[BaseModel], label: str,
) -> list[dict]:
    path = _resolve(seed_dir, filename)
    try:
        return validate_records(_read_json(path), schema, label)
    except ValidationError as e:
        raise StartupError(f"Seed file {path.name} is invalid: {e.message}") from e
