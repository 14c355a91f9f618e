"""In-memory cart store.

One ``CartStore`` is built when the app starts and handed to the routes
through ``app.state``; tests build their own with an in-memory lookup.

Totals are never adjusted incrementally: every mutation ends with
``recalculate`` over the items actually present.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from shared.logging_config import get_logger
from shared.products import ProductLookup, utcnow

from .errors import ItemNotFound, ProductNotFound
from .models import Cart, CartItem, CartSummary

logger = get_logger("cart.store")

CENT = Decimal("0.01")


def round_money(value) -> float:
    """Round a money amount half-up to cents.

    Floats go through ``str`` first so 10.99 is taken as the decimal 10.99,
    not its binary approximation.
    """
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return float(value.quantize(CENT, rounding=ROUND_HALF_UP))


def recalculate(cart: Cart) -> Cart:
    amount = sum((Decimal(str(item.price)) * item.quantity for item in cart.items), Decimal("0"))
    cart.total_amount = round_money(amount)
    cart.total_items = sum(item.quantity for item in cart.items)
    return cart


class CartStore:
    def __init__(self, products: ProductLookup):
        self.products = products
        self._carts: dict[str, Cart] = {}

    def _touch(self, cart: Cart) -> None:
        # updated_at never goes backwards, even if the wall clock does
        now = utcnow()
        if cart.updated_at is None or now > cart.updated_at:
            cart.updated_at = now

    def _commit(self, cart: Cart) -> Cart:
        recalculate(cart)
        self._touch(cart)
        return cart

    def find_cart(self, user_id: str) -> Optional[Cart]:
        return self._carts.get(user_id)

    def get_or_create_cart(self, user_id: str) -> Cart:
        cart = self._carts.get(user_id)
        if cart is None:
            cart = Cart(user_id=user_id)
            self._carts[user_id] = cart
            logger.debug("Created cart %s for user %s", cart.id, user_id)
        return cart

    def get_cart(self, user_id: str) -> Cart:
        return self.get_or_create_cart(user_id)

    async def add_to_cart(self, user_id: str, product_id: str, quantity: Optional[int] = None) -> Cart:
        """Add ``quantity`` of a product, summing with any existing line.

        ``None`` means 1. Zero is taken literally and stores a zero-quantity
        line. The price and descriptive fields of an existing line are kept
        from the first add.
        """
        if quantity is None:
            quantity = 1

        product = await self.products.resolve_one(product_id)
        if product is None:
            logger.warning("Add to cart for user %s: product %r not found", user_id, product_id)
            raise ProductNotFound(product_id)

        # nothing below awaits, so the mutation applies in one step
        cart = self.get_or_create_cart(user_id)
        item = cart.find_item(product.id)
        if item is not None:
            item.quantity += quantity
        else:
            cart.items.append(CartItem.from_product(product, quantity))

        self._commit(cart)
        logger.info(
            "User %s added %s x %s (cart total %s)", user_id, quantity, product.id, cart.total_amount
        )
        return cart

    def update_cart_item(self, user_id: str, product_id: str, quantity: int) -> Cart:
        """Set an item's quantity; zero or less removes the item."""
        cart = self._carts.get(user_id)
        item = cart.find_item(product_id) if cart is not None else None
        if item is None:
            logger.warning("Update for user %s: %r is not in the cart", user_id, product_id)
            raise ItemNotFound(user_id, product_id)

        if quantity <= 0:
            cart.items.remove(item)
        else:
            item.quantity = quantity

        self._commit(cart)
        logger.info("User %s set %s to %s", user_id, product_id, max(quantity, 0))
        return cart

    def remove_from_cart(self, user_id: str, product_id: str) -> Cart:
        cart = self.get_or_create_cart(user_id)
        cart.items = [item for item in cart.items if item.id != product_id]
        self._commit(cart)
        logger.info("User %s removed %s", user_id, product_id)
        return cart

    def clear_cart(self, user_id: str) -> Cart:
        cart = self.get_or_create_cart(user_id)
        cart.items = []
        self._commit(cart)
        logger.info("Cleared cart %s for user %s", cart.id, user_id)
        return cart

    def get_cart_summary(self, user_id: str) -> CartSummary:
        cart = self.get_or_create_cart(user_id)
        return CartSummary(
            total_items=cart.total_items,
            total_amount=cart.total_amount,
            item_count=len(cart.items),
        )
