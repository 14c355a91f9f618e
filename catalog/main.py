from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.errors import install_error_handlers
from shared.logging_config import setup_logging
from shared import config

from .data import SAMPLE_PRODUCTS
from .routers import router as products_router
from .store import ProductCatalog


def create_app(catalog: Optional[ProductCatalog] = None) -> FastAPI:
    setup_logging(config.LOG_LEVEL)

    app = FastAPI(title="product-service", version="1.0.0")
    app.state.catalog = catalog if catalog is not None else ProductCatalog(SAMPLE_PRODUCTS)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.allowed_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    install_error_handlers(app, validation_message="Invalid product data")
    app.include_router(products_router)
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("catalog.main:app", host="0.0.0.0", port=config.PRODUCT_SERVICE_PORT, reload=True)
