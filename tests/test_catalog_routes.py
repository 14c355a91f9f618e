"""
Component tests for the product service.

Uses a fresh ProductCatalog seeded with the sample products for each test.
"""
import pytest
from fastapi.testclient import TestClient

from catalog.data import SAMPLE_PRODUCTS
from catalog.store import ProductCatalog
from shopcart.store import CartStore

NEW_PRODUCT = {
    "name": "Organic Bananas",
    "price": 2.99,
    "description": "Fresh organic bananas from local farms",
    "image": "https://example.com/images/banana.jpg",
    "dataAiHint": "fruit, organic, potassium",
    "category": "fruits",
    "inStock": True,
    "discount": 15,
}


class TestListProducts:
    def test_default_listing(self, catalog_client: TestClient):
        response = catalog_client.get("/api/products")

        assert response.status_code == 200
        data = response.json()
        assert len(data["products"]) == 8
        assert data["pagination"] == {"total": 8, "page": 1, "limit": 10, "totalPages": 1}

    def test_product_shape(self, catalog_client: TestClient):
        product = catalog_client.get("/api/products").json()["products"][0]

        for key in ("id", "name", "price", "description", "image", "dataAiHint",
                    "category", "inStock", "discount", "createdAt", "updatedAt"):
            assert key in product
        assert isinstance(product["id"], str)

    def test_filter_by_category(self, catalog_client: TestClient):
        products = catalog_client.get("/api/products?category=fruits").json()["products"]

        assert {p["id"] for p in products} == {"1", "8"}
        assert all(p["category"] == "fruits" for p in products)

    def test_filter_by_price_range(self, catalog_client: TestClient):
        products = catalog_client.get("/api/products?minPrice=2&maxPrice=5").json()["products"]

        assert products
        assert all(2 <= p["price"] <= 5 for p in products)

    def test_filter_by_stock(self, catalog_client: TestClient):
        products = catalog_client.get("/api/products?inStock=false").json()["products"]

        assert [p["id"] for p in products] == ["5"]

    def test_search_matches_name_or_description(self, catalog_client: TestClient):
        products = catalog_client.get("/api/products?search=ORGANIC").json()["products"]

        assert {p["id"] for p in products} == {"1", "4"}

    def test_combined_filters(self, catalog_client: TestClient):
        products = catalog_client.get(
            "/api/products?category=dairy&inStock=true&minPrice=1"
        ).json()["products"]

        assert [p["id"] for p in products] == ["3"]

    def test_non_matching_filter_is_empty(self, catalog_client: TestClient):
        data = catalog_client.get("/api/products?category=electronics").json()

        assert data["products"] == []
        assert data["pagination"]["total"] == 0
        assert data["pagination"]["totalPages"] == 0

    def test_pagination(self, catalog_client: TestClient):
        data = catalog_client.get("/api/products?page=2&limit=3").json()

        assert [p["id"] for p in data["products"]] == ["4", "5", "6"]
        assert data["pagination"] == {"total": 8, "page": 2, "limit": 3, "totalPages": 3}

    @pytest.mark.parametrize("query", ["page=0", "limit=0", "limit=101", "minPrice=-1"])
    def test_invalid_query_is_rejected(self, catalog_client: TestClient, query):
        response = catalog_client.get(f"/api/products?{query}")

        assert response.status_code == 400
        assert "error" in response.json()


class TestGetProduct:
    def test_existing_product(self, catalog_client: TestClient):
        response = catalog_client.get("/api/products/1")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == "1"
        assert data["name"] == "Organic Apples"
        assert data["discount"] == 10

    def test_unknown_product_returns_404(self, catalog_client: TestClient):
        response = catalog_client.get("/api/products/non-existent-999")

        assert response.status_code == 404
        assert response.json() == {"error": "Product not found"}

    def test_sample_discounts(self, catalog_client: TestClient):
        products = {p["id"]: p for p in catalog_client.get("/api/products").json()["products"]}

        assert products["1"]["discount"] == 10
        assert products["2"]["discount"] == 5
        assert products["4"]["discount"] == 20
        assert products["6"]["discount"] == 25


class TestCreateAndUpdateProduct:
    def test_create_product(self, catalog_client: TestClient):
        response = catalog_client.post("/api/products", json=NEW_PRODUCT)

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == "9"
        for key, value in NEW_PRODUCT.items():
            assert data[key] == value
        assert "createdAt" in data and "updatedAt" in data

        assert catalog_client.get("/api/products/9").status_code == 200

    def test_discount_is_optional(self, catalog_client: TestClient):
        body = {k: v for k, v in NEW_PRODUCT.items() if k != "discount"}

        response = catalog_client.post("/api/products", json=body)

        assert response.status_code == 201
        assert response.json()["discount"] is None

    def test_decimal_discount(self, catalog_client: TestClient):
        response = catalog_client.post("/api/products", json={**NEW_PRODUCT, "discount": 12.5})

        assert response.status_code == 201
        assert response.json()["discount"] == 12.5

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"price": 2.99},
            {**NEW_PRODUCT, "price": -1},
            {**NEW_PRODUCT, "price": "cheap"},
            {**NEW_PRODUCT, "name": ""},
            {**NEW_PRODUCT, "discount": -5},
            {**NEW_PRODUCT, "discount": 150},
            {**NEW_PRODUCT, "name": "A" * 1_000_000},
            {**NEW_PRODUCT, "description": "D" * 10_001},
        ],
    )
    def test_invalid_product_is_rejected(self, catalog_client: TestClient, body):
        response = catalog_client.post("/api/products", json=body)

        assert response.status_code == 400
        assert "Invalid product data" in response.json()["error"]

    def test_partial_update(self, catalog_client: TestClient):
        created = catalog_client.post("/api/products", json=NEW_PRODUCT).json()

        response = catalog_client.put(f"/api/products/{created['id']}", json={"discount": 30})

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == created["id"]
        assert data["discount"] == 30
        assert data["name"] == NEW_PRODUCT["name"]
        assert data["updatedAt"] >= created["updatedAt"]

    def test_long_description_within_limit(self, catalog_client: TestClient):
        response = catalog_client.post("/api/products", json={**NEW_PRODUCT, "description": "D" * 10_000})

        assert response.status_code == 201
        assert len(response.json()["description"]) == 10_000

    def test_update_rejects_oversized_name(self, catalog_client: TestClient):
        response = catalog_client.put("/api/products/1", json={"name": "A" * 1_000_000})

        assert response.status_code == 400
        assert catalog_client.get("/api/products/1").json()["name"] == "Organic Apples"

    def test_update_rejects_invalid_discount(self, catalog_client: TestClient):
        response = catalog_client.put("/api/products/1", json={"discount": 200})

        assert response.status_code == 400
        assert "Invalid product data" in response.json()["error"]

    def test_update_unknown_product(self, catalog_client: TestClient):
        response = catalog_client.put("/api/products/999", json={"price": 1.5})

        assert response.status_code == 404

    def test_edits_do_not_touch_seed_data(self, catalog_client: TestClient):
        catalog_client.put("/api/products/1", json={"name": "Changed"})

        fresh = ProductCatalog(SAMPLE_PRODUCTS)
        assert fresh.get("1").name == "Organic Apples"


class TestHealth:
    def test_health(self, catalog_client: TestClient):
        response = catalog_client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "product-service"
        assert "timestamp" in data


class TestCatalogAsLookup:
    @pytest.mark.asyncio
    async def test_cart_can_use_catalog_directly(self, catalog: ProductCatalog):
        store = CartStore(catalog)

        cart = await store.add_to_cart("u1", "1", 3)

        assert cart.items[0].name == "Organic Apples"
        assert cart.total_amount == 11.97
