"""Product records and the Product Lookup capability the cart depends on.

The cart only ever needs two calls from the product side:

- ``resolve_one(product_id)`` -> ``Product`` or ``None`` when unknown
- ``resolve_many(product_ids)`` -> the subset of products that exist

``InMemoryProductLookup`` backs tests and the product service itself;
``HttpProductLookup`` talks to a running product service.
"""

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, Optional, Protocol
from urllib.parse import quote

import httpx


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _parse_timestamp(value) -> datetime:
    if isinstance(value, datetime):
        return value
    if not value:
        return utcnow()
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


@dataclass
class Product:
    id: str
    name: str
    price: float
    description: str = ""
    image: str = ""
    data_ai_hint: str = ""
    category: str = ""
    in_stock: bool = True
    discount: Optional[float] = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    @classmethod
    def from_dict(cls, data: dict) -> "Product":
        """Build a product from product-service JSON (camelCase keys)."""
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            price=float(data.get("price", 0)),
            description=data.get("description") or "",
            image=data.get("image") or "",
            data_ai_hint=data.get("dataAiHint") or "",
            category=data.get("category") or "",
            in_stock=bool(data.get("inStock", True)),
            discount=data.get("discount"),
            created_at=_parse_timestamp(data.get("createdAt")),
            updated_at=_parse_timestamp(data.get("updatedAt")),
        )


class ProductLookup(Protocol):
    async def resolve_one(self, product_id: str) -> Optional[Product]:
        ...

    async def resolve_many(self, product_ids: Iterable[str]) -> list[Product]:
        ...


class InMemoryProductLookup:
    """Dict-backed lookup; products keep their insertion order."""

    def __init__(self, products: Iterable[Product] = ()):
        self._products: dict[str, Product] = {}
        for product in products:
            self.add(product)

    def add(self, product: Product) -> Product:
        self._products[product.id] = product
        return product

    def get(self, product_id: str) -> Optional[Product]:
        if not product_id:
            return None
        return self._products.get(product_id)

    def all(self) -> list[Product]:
        return list(self._products.values())

    async def resolve_one(self, product_id: str) -> Optional[Product]:
        return self.get(product_id)

    async def resolve_many(self, product_ids: Iterable[str]) -> list[Product]:
        found = (self.get(pid) for pid in product_ids)
        return [p for p in found if p is not None]


class HttpProductLookup:
    """Resolve products through the product service REST API.

    A 404 means "not found" and yields ``None``. Any other failure (non-2xx
    status, connection error, timeout) is raised as ``httpx.HTTPError`` and
    left to the caller; nothing is retried here.
    """

    def __init__(self, base_url: str, timeout: float = 5.0, client: Optional[httpx.AsyncClient] = None):
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    def _product_url(self, product_id: str) -> str:
        return f"{self.base_url}/api/products/{quote(product_id, safe='')}"

    async def resolve_one(self, product_id: str) -> Optional[Product]:
        if not product_id:
            return None
        resp = await self._client.get(self._product_url(product_id))
        if resp.status_code == 404:
            return None
        resp.raise_for_status()
        return Product.from_dict(resp.json())

    async def resolve_many(self, product_ids: Iterable[str]) -> list[Product]:
        # every request is awaited before the first failure is raised
        results = await asyncio.gather(
            *(self.resolve_one(pid) for pid in product_ids), return_exceptions=True
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result
        return [p for p in results if p is not None]

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
