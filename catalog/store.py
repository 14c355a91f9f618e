import math
from dataclasses import replace
from typing import Iterable, Optional

from shared.logging_config import get_logger
from shared.products import InMemoryProductLookup, Product, utcnow

logger = get_logger("catalog.store")


class ProductCatalog(InMemoryProductLookup):
    """The product service's in-memory catalog.

    Inherits ``resolve_one``/``resolve_many`` so the cart service can use a
    catalog directly as its product lookup when both run in one process.
    """

    def __init__(self, products: Iterable[Product] = ()):
        # copies, so edits never leak back into the seed list
        super().__init__(replace(p) for p in products)

    def search(
        self,
        category: Optional[str] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        in_stock: Optional[bool] = None,
        search: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> tuple[list[Product], dict]:
        """Filter (AND) then paginate. Returns ``(page_items, pagination)``."""
        matches = self.all()
        if category:
            matches = [p for p in matches if p.category == category]
        if min_price is not None:
            matches = [p for p in matches if p.price >= min_price]
        if max_price is not None:
            matches = [p for p in matches if p.price <= max_price]
        if in_stock is not None:
            matches = [p for p in matches if p.in_stock == in_stock]
        if search:
            needle = search.lower()
            matches = [
                p for p in matches
                if needle in p.name.lower() or needle in p.description.lower()
            ]

        total = len(matches)
        start = (page - 1) * limit
        pagination = {
            "total": total,
            "page": page,
            "limit": limit,
            "totalPages": math.ceil(total / limit) if total else 0,
        }
        return matches[start:start + limit], pagination

    def _next_id(self) -> str:
        numeric = [int(p.id) for p in self.all() if p.id.isdigit()]
        return str(max(numeric, default=0) + 1)

    def create(self, **fields) -> Product:
        now = utcnow()
        product = Product(id=self._next_id(), created_at=now, updated_at=now, **fields)
        self.add(product)
        logger.info("Created product %s (%s)", product.id, product.name)
        return product

    def update(self, product_id: str, **fields) -> Optional[Product]:
        product = self.get(product_id)
        if product is None:
            return None
        for name, value in fields.items():
            setattr(product, name, value)
        product.updated_at = utcnow()
        logger.info("Updated product %s: %s", product_id, ", ".join(sorted(fields)) or "no fields")
        return product
