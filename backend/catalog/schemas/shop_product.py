"""Shop Product Schemas: Pydantic models for shop product payloads and responses.

Invariants:
    - ShopProductCreate: title/description/logo_src/logo_alt required and non-empty; title stripped
    - order_index defaults to 0 and must fit the Integer column
    - ShopProductResponse serializes id as "_id"
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from catalog.db.base import INTEGER_MAX, INTEGER_MIN


class ShopProductCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    logo_src: str = Field(min_length=1)
    logo_alt: str = Field(min_length=1)
    order_index: int = Field(default=0, ge=INTEGER_MIN, le=INTEGER_MAX)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v


class ShopProductResponse(ShopProductCreate):
    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(serialization_alias="_id")
    created_at: datetime
    updated_at: datetime
