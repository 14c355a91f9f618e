from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import uuid4

from shared.products import Product, utcnow


@dataclass
class CartItem:
    # id is the product id; name/price/etc. are a snapshot taken at first add
    id: str
    name: str
    price: float
    quantity: int
    description: str = ""
    image: str = ""
    data_ai_hint: str = ""
    added_at: datetime = field(default_factory=utcnow)

    @classmethod
    def from_product(cls, product: Product, quantity: int) -> "CartItem":
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            quantity=quantity,
            description=product.description,
            image=product.image,
            data_ai_hint=product.data_ai_hint,
        )


@dataclass(eq=False)
class Cart:
    user_id: str
    id: str = field(default_factory=lambda: str(uuid4()))
    items: list[CartItem] = field(default_factory=list)
    total_items: int = 0
    total_amount: float = 0.0
    created_at: datetime = field(default_factory=utcnow)
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if self.updated_at is None:
            self.updated_at = self.created_at

    def find_item(self, product_id: str) -> Optional[CartItem]:
        for item in self.items:
            if item.id == product_id:
                return item
        return None


@dataclass(frozen=True)
class CartSummary:
    total_items: int
    total_amount: float
    item_count: int
