from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from shared.products import Product


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


NAME_MAX = 200
DESCRIPTION_MAX = 10_000


# 🛍️ Product
class ProductBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=NAME_MAX)
    price: float = Field(..., gt=0)
    description: str = Field("", max_length=DESCRIPTION_MAX)
    image: str = ""
    data_ai_hint: str = ""
    category: str = ""
    in_stock: bool = True
    discount: Optional[float] = Field(None, ge=0, le=100)


class ProductCreate(ProductBase):
    pass


class ProductUpdate(CamelModel):
    # partial update: only fields present in the body are applied
    name: Optional[str] = Field(None, min_length=1, max_length=NAME_MAX)
    price: Optional[float] = Field(None, gt=0)
    description: Optional[str] = Field(None, max_length=DESCRIPTION_MAX)
    image: Optional[str] = None
    data_ai_hint: Optional[str] = None
    category: Optional[str] = None
    in_stock: Optional[bool] = None
    discount: Optional[float] = Field(None, ge=0, le=100)

    def changes(self) -> dict:
        fields = self.model_dump(exclude_unset=True)
        # discount may be cleared with null, nothing else may
        return {k: v for k, v in fields.items() if v is not None or k == "discount"}


class ProductOut(ProductBase):
    id: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_product(cls, p: Product) -> "ProductOut":
        return cls(
            id=p.id,
            name=p.name,
            price=p.price,
            description=p.description,
            image=p.image,
            data_ai_hint=p.data_ai_hint,
            category=p.category,
            in_stock=p.in_stock,
            discount=p.discount,
            created_at=p.created_at,
            updated_at=p.updated_at,
        )


class Pagination(CamelModel):
    total: int
    page: int
    limit: int
    total_pages: int


class ProductListOut(BaseModel):
    products: List[ProductOut]
    pagination: Pagination
