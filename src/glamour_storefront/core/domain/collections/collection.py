from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CollectionType(StrEnum):
    MAKEUP = "makeup"
    SKINCARE = "skincare"
    FRAGRANCES = "fragrances"
    SEASONAL = "seasonal"


class CollectionDraft(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=1, max_length=100)
    description: str = Field(min_length=1, max_length=1000)
    type: CollectionType
    image: str | None = None
    active: bool = True

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class CollectionPatch(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=1000)
    type: CollectionType | None = None
    image: str | None = None
    active: bool | None = None


class Collection(CollectionDraft):
    id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
