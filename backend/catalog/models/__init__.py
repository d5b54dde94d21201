"""ORM Models: SQLAlchemy declarative models for both persistence layouts.

Invariants:
    - All models inherit from Base (db/base.py)
    - partners / shop_products belong to the records layout; collection_blobs to the blob layout

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata knows every table before create_all runs
"""

from catalog.models.partner import Partner  # noqa: F401
from catalog.models.shop_product import ShopProduct  # noqa: F401
from catalog.models.collection_blob import CollectionBlob  # noqa: F401
