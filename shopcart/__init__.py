"""Cart service: per-user carts priced from the product service."""

__version__ = "1.0.0"
