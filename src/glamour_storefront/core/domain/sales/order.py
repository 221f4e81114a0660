from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from glamour_storefront.core.domain.sales.order_status import OrderStatus


class OrderItem(BaseModel):
    product_id: str = Field(min_length=1)
    product_name: str = ""
    quantity: int = Field(ge=1)
    price: float = Field(ge=0)
    size: str | None = None
    color: str | None = None

    @property
    def line_total(self) -> float:
        return self.price * self.quantity


class OrderRequest(BaseModel):
    """Checkout submission. Totals are always computed server-side."""

    model_config = ConfigDict(extra="ignore")

    customer_name: str = Field(min_length=1, max_length=120)
    email: EmailStr
    phone: str = Field(min_length=1, max_length=40)
    address: str = Field(min_length=1, max_length=500)
    city: str | None = None
    postal_code: str | None = None
    items: list[OrderItem] = Field(min_length=1)
    notes: str | None = Field(default=None, max_length=2000)

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, value: str) -> str:
        return value.strip().lower()

    @property
    def subtotal(self) -> float:
        return round(sum(item.line_total for item in self.items), 2)


class OrderStatusUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    status: OrderStatus


class Order(OrderRequest):
    id: str
    order_number: str
    subtotal_amount: float
    shipping_fee: float
    tax_amount: float
    total_amount: float
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime | None = None
    updated_at: datetime | None = None
