from __future__ import annotations

from pydantic import BaseModel, Field


class StoreProfile(BaseModel):
    """Storefront identity used by SEO templates and checkout totals."""

    store_name: str = "Glamour Cosmetics"
    country: str = "Pakistan"
    currency_label: str = "Rs."
    shipping_fee: float = Field(default=500, ge=0)
    tax_rate: float = Field(default=0.17, ge=0, le=1)
    generic_keywords: list[str] = Field(
        default_factory=lambda: ["beauty products", "buy online", "cosmetics"]
    )

    def format_price(self, price: float) -> str:
        amount = int(price) if float(price).is_integer() else round(price, 2)
        return f"{self.currency_label} {amount}"
