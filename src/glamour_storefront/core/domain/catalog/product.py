from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from glamour_storefront.core.domain.catalog.value_objects.product_category import ProductCategory
from glamour_storefront.core.domain.catalog.value_objects.product_type import ProductType
from glamour_storefront.core.exceptions.draft_validation_error import DraftValidationError

_CLEARABLE_FIELDS = frozenset({"description", "image"})


def _strip_required(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("must not be blank")
    return value


def _clean_list(values: list[str]) -> list[str]:
    cleaned = [v.strip() for v in values if v and v.strip()]
    if not cleaned:
        raise ValueError("must contain at least one non-blank entry")
    return cleaned


class ProductDraft(BaseModel):
    """Attributes an admin supplies when creating a product."""

    model_config = ConfigDict(extra="ignore", use_enum_values=False)

    name: str = Field(max_length=100)
    description: str | None = Field(default=None, max_length=1000)
    price: float = Field(ge=0)
    image: str | None = None
    category: ProductCategory = ProductCategory.WOMEN
    type: ProductType
    collection: str = ""
    in_stock: bool = True
    featured: bool = False
    sizes: list[str] = Field(default_factory=lambda: ["Standard"])
    colors: list[str] = Field(default_factory=lambda: ["Default"])

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        return _strip_required(value)

    @field_validator("collection")
    @classmethod
    def _strip_collection(cls, value: str) -> str:
        return value.strip()

    @field_validator("sizes", "colors")
    @classmethod
    def _non_empty_lists(cls, values: list[str]) -> list[str]:
        return _clean_list(values)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> ProductDraft:
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise DraftValidationError.from_pydantic(exc) from exc

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class ProductPatch(BaseModel):
    """Partial update for an existing product. Only explicitly sent fields are applied.

    ``description`` and ``image`` may be sent as null to clear them; null is ignored elsewhere.
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = Field(default=None, max_length=100)
    description: str | None = Field(default=None, max_length=1000)
    price: float | None = Field(default=None, ge=0)
    image: str | None = None
    category: ProductCategory | None = None
    type: ProductType | None = None
    collection: str | None = None
    in_stock: bool | None = None
    featured: bool | None = None
    sizes: list[str] | None = None
    colors: list[str] | None = None
    slug: str | None = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str | None) -> str | None:
        return None if value is None else _strip_required(value)

    @field_validator("sizes", "colors")
    @classmethod
    def _non_empty_lists(cls, values: list[str] | None) -> list[str] | None:
        return None if values is None else _clean_list(values)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> ProductPatch:
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise DraftValidationError.from_pydantic(exc) from exc

    def changes(self) -> dict[str, Any]:
        sent = self.model_dump(mode="json", exclude_unset=True)
        return {k: v for k, v in sent.items() if v is not None or k in _CLEARABLE_FIELDS}


class Product(ProductDraft):
    """Persisted product record."""

    id: str
    slug: str
    meta_title: str | None = None
    meta_description: str | None = None
    meta_keywords: list[str] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None
