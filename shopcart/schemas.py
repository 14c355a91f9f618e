from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from .models import Cart, CartItem, CartSummary


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


# 🛒 Requests
class CartAddRequest(CamelModel):
    product_id: str
    quantity: int = Field(1, ge=1)

    @field_validator("product_id")
    @classmethod
    def _clean_product_id(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("productId cannot be empty")
        return v


class CartUpdateRequest(CamelModel):
    # <= 0 removes the item
    quantity: int


# 📦 Responses
class CartItemOut(CamelModel):
    id: str
    name: str
    price: float
    quantity: int
    description: str = ""
    image: str = ""
    data_ai_hint: str = ""
    added_at: datetime

    @classmethod
    def from_item(cls, item: CartItem) -> "CartItemOut":
        return cls(
            id=item.id,
            name=item.name,
            price=item.price,
            quantity=item.quantity,
            description=item.description,
            image=item.image,
            data_ai_hint=item.data_ai_hint,
            added_at=item.added_at,
        )


class CartOut(CamelModel):
    id: str
    user_id: str
    items: List[CartItemOut]
    total_items: int
    total_amount: float
    created_at: datetime
    updated_at: Optional[datetime] = None

    @classmethod
    def from_cart(cls, cart: Cart) -> "CartOut":
        return cls(
            id=cart.id,
            user_id=cart.user_id,
            items=[CartItemOut.from_item(it) for it in cart.items],
            total_items=cart.total_items,
            total_amount=cart.total_amount,
            created_at=cart.created_at,
            updated_at=cart.updated_at,
        )


class CartSummaryOut(CamelModel):
    total_items: int
    total_amount: float
    item_count: int

    @classmethod
    def from_summary(cls, summary: CartSummary) -> "CartSummaryOut":
        return cls(
            total_items=summary.total_items,
            total_amount=summary.total_amount,
            item_count=summary.item_count,
        )


class HealthOut(BaseModel):
    status: str
    service: str
    timestamp: datetime
