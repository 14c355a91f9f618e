import pytest
from fastapi.testclient import TestClient

from catalog.data import SAMPLE_PRODUCTS
from catalog.main import create_app as create_catalog_app
from catalog.store import ProductCatalog
from shared.products import InMemoryProductLookup, Product
from shopcart.main import create_app as create_cart_app
from shopcart.store import CartStore


def make_product(**overrides) -> Product:
    """Product with sensible defaults; override any field."""
    defaults = dict(
        id="product-default",
        name="Default Test Product",
        price=10.00,
        description="A default test product",
        image="https://example.com/default.jpg",
        data_ai_hint="default product hint",
    )
    defaults.update(overrides)
    return Product(**defaults)


PRODUCT_1 = make_product(id="product-1", name="Test Product 1", price=10.99,
                         description="A test product", image="https://example.com/image1.jpg",
                         data_ai_hint="test product hint")
PRODUCT_2 = make_product(id="product-2", name="Test Product 2", price=25.50,
                         description="Another test product", image="https://example.com/image2.jpg",
                         data_ai_hint="another test product hint")
PRODUCT_3 = make_product(id="product-3", name="Test Product 3", price=5.00)
LOW_PRICE = make_product(id="low-price-product", name="Low Price Product", price=0.07)
PRECISION = make_product(id="precision-product", name="Precision Test", price=0.1)
COMPLEX_DECIMAL = make_product(id="complex-decimal", name="Complex Decimal Product", price=15.97)
EDGE_CASE = make_product(id="edge-case-product", name="Edge Case Product", price=7.03)

TEST_PRODUCTS = [PRODUCT_1, PRODUCT_2, PRODUCT_3, LOW_PRICE, PRECISION, COMPLEX_DECIMAL, EDGE_CASE]


class RecordingLookup(InMemoryProductLookup):
    """In-memory lookup that remembers which ids were resolved."""

    def __init__(self, products=()):
        super().__init__(products)
        self.calls: list[str] = []

    async def resolve_one(self, product_id):
        self.calls.append(product_id)
        return await super().resolve_one(product_id)


class FailingLookup:
    """Lookup whose transport is down."""

    async def resolve_one(self, product_id):
        raise ConnectionError("product service unreachable")

    async def resolve_many(self, product_ids):
        raise ConnectionError("product service unreachable")


@pytest.fixture
def lookup() -> RecordingLookup:
    return RecordingLookup(TEST_PRODUCTS)


@pytest.fixture
def store(lookup) -> CartStore:
    return CartStore(lookup)


@pytest.fixture
def test_client(store):
    """Cart service wired to the in-memory lookup."""
    with TestClient(create_cart_app(store=store)) as client:
        yield client


@pytest.fixture
def catalog() -> ProductCatalog:
    return ProductCatalog(SAMPLE_PRODUCTS)


@pytest.fixture
def catalog_client(catalog):
    with TestClient(create_catalog_app(catalog)) as client:
        yield client
