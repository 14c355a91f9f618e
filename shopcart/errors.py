from typing import Optional


class CartError(Exception):
    """Expected, user-triggerable cart failure with an HTTP status."""

    status_code = 400
    message = "Cart error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ProductNotFound(CartError):
    status_code = 404
    message = "Product not found"

    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__()


class ItemNotFound(CartError):
    status_code = 404
    message = "Item not found in cart"

    def __init__(self, user_id: str, product_id: str):
        self.user_id = user_id
        self.product_id = product_id
        super().__init__()
