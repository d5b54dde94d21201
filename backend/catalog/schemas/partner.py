"""Partner Schemas: Pydantic models for partner payloads and responses.

Invariants:
    - PartnerCreate: name/logo_src/website_url/alt_text required and non-empty; name stripped
    - order_index defaults to 0 and must fit the Integer column
    - PartnerResponse serializes id as "_id"
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from catalog.db.base import INTEGER_MAX, INTEGER_MIN


class PartnerCreate(BaseModel):
    """One partner as supplied to bulk-replace or a seed file."""
    name: str = Field(min_length=1)
    logo_src: str = Field(min_length=1)
    website_url: str = Field(min_length=1)
    alt_text: str = Field(min_length=1)
    order_index: int = Field(default=0, ge=INTEGER_MIN, le=INTEGER_MAX)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class PartnerResponse(PartnerCreate):
    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(serialization_alias="_id")
    created_at: datetime
    updated_at: datetime
