"""Environment-driven settings for both services."""

import os

# Where HttpProductLookup finds the product service.
PRODUCT_SERVICE_URL = os.getenv("PRODUCT_SERVICE_URL", "http://localhost:3001")
PRODUCT_LOOKUP_TIMEOUT = float(os.getenv("PRODUCT_LOOKUP_TIMEOUT", "5.0"))

CART_SERVICE_PORT = int(os.getenv("CART_SERVICE_PORT", "3002"))
PRODUCT_SERVICE_PORT = int(os.getenv("PRODUCT_SERVICE_PORT", "3001"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def allowed_origins() -> list[str]:
    raw = os.getenv("ALLOWED_ORIGINS", "*")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]
