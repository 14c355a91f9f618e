from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from shared.products import utcnow

from .schemas import ProductCreate, ProductListOut, ProductOut, ProductUpdate
from .store import ProductCatalog

router = APIRouter(prefix="/api", tags=["products"])


def get_catalog(request: Request) -> ProductCatalog:
    return request.app.state.catalog


@router.get("/products", response_model=ProductListOut, summary="List products")
async def list_products(
    category: Optional[str] = None,
    min_price: Optional[float] = Query(None, alias="minPrice", ge=0),
    max_price: Optional[float] = Query(None, alias="maxPrice", ge=0),
    in_stock: Optional[bool] = Query(None, alias="inStock"),
    search: Optional[str] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    catalog: ProductCatalog = Depends(get_catalog),
):
    products, pagination = catalog.search(
        category=category,
        min_price=min_price,
        max_price=max_price,
        in_stock=in_stock,
        search=search,
        page=page,
        limit=limit,
    )
    return {"products": [ProductOut.from_product(p) for p in products], "pagination": pagination}


@router.get("/products/{product_id}", response_model=ProductOut, summary="Get product by id")
async def get_product(product_id: str, catalog: ProductCatalog = Depends(get_catalog)):
    product = catalog.get(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return ProductOut.from_product(product)


@router.post("/products", response_model=ProductOut, status_code=status.HTTP_201_CREATED)
async def create_product(payload: ProductCreate, catalog: ProductCatalog = Depends(get_catalog)):
    product = catalog.create(**payload.model_dump())
    return ProductOut.from_product(product)


@router.put("/products/{product_id}", response_model=ProductOut)
async def update_product(
    product_id: str,
    payload: ProductUpdate,
    catalog: ProductCatalog = Depends(get_catalog),
):
    product = catalog.update(product_id, **payload.changes())
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return ProductOut.from_product(product)


@router.get("/health")
async def health():
    return {"status": "healthy", "service": "product-service", "timestamp": utcnow().isoformat()}
