from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from shared import config
from shared.errors import error_response, install_error_handlers
from shared.logging_config import get_logger, setup_logging
from shared.products import HttpProductLookup, ProductLookup, utcnow

from . import cart
from .errors import CartError
from .schemas import HealthOut
from .store import CartStore

logger = get_logger("cart.app")


def create_app(store: Optional[CartStore] = None, lookup: Optional[ProductLookup] = None) -> FastAPI:
    """Build the cart service.

    Without arguments the store resolves products over HTTP against
    ``PRODUCT_SERVICE_URL``. Pass ``store`` or ``lookup`` to run against
    anything else (tests use an in-memory lookup).
    """
    setup_logging(config.LOG_LEVEL)

    if store is None:
        if lookup is None:
            lookup = HttpProductLookup(config.PRODUCT_SERVICE_URL, timeout=config.PRODUCT_LOOKUP_TIMEOUT)
        store = CartStore(lookup)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("cart-service starting, product lookup: %s", type(store.products).__name__)
        yield
        aclose = getattr(store.products, "aclose", None)
        if aclose is not None:
            await aclose()
        logger.info("cart-service stopped")

    app = FastAPI(title="cart-service", version="1.0.0", lifespan=lifespan)
    app.state.cart_store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.allowed_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    install_error_handlers(app, validation_message="Invalid request data")

    @app.exception_handler(CartError)
    async def cart_error_handler(request: Request, exc: CartError):
        return error_response(exc.status_code, exc.message)

    app.include_router(cart.router)

    @app.get("/health", response_model=HealthOut)
    async def health():
        return HealthOut(status="healthy", service="cart-service", timestamp=utcnow())

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("shopcart.main:app", host="0.0.0.0", port=config.CART_SERVICE_PORT, reload=True)
