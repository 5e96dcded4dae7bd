"""
Consumer Service end to end against an in-process Supplier Service.
"""

from fastapi.testclient import TestClient


def _add_product(client: TestClient, category_id: int, name: str, price: float) -> dict:
    response = client.post(
        "/products",
        json={
            "name": name,
            "description": f"{name} description",
            "price": price,
            "categoryId": category_id,
        },
    )
    assert response.status_code == 201
    return response.json()


class TestPriceScenario:
    """Category{1, Electronics} with Product{Phone, 999.99}."""

    def test_range_returns_phone(self, client: TestClient, catalog: dict):
        assert catalog["category"]["id"] == 1

        response = client.get(
            "/products/price/range/",
            params={"min": 500, "max": 1500, "page": 0, "size": 10},
        )

        assert response.status_code == 200
        products = response.json()
        assert len(products) == 1
        assert products[0]["name"] == "Phone"
        assert products[0]["categoryId"] == 1

    def test_greater_is_strict(self, client: TestClient, catalog: dict):
        response = client.get("/products/price/greater/", params={"min": 999.99})

        assert response.status_code == 200
        assert response.json() == []

    def test_less_is_strict(self, client: TestClient, catalog: dict):
        assert client.get("/products/price/less/", params={"max": 999.99}).json() == []
        assert len(client.get("/products/price/less/", params={"max": 1000}).json()) == 1


class TestCategories:
    def test_create_and_read_back(self, client: TestClient):
        created = client.post("/categories", json={"name": "Books"})

        assert created.status_code == 201
        body = created.json()
        assert body["name"] == "Books"
        assert client.get(f"/categories/{body['id']}").json() == body

    def test_duplicate_id_is_passed_through(self, client: TestClient, catalog: dict):
        response = client.post(
            "/categories", json={"id": catalog["category"]["id"], "name": "Again"}
        )

        assert response.status_code == 409
        assert response.json()["error"]["type"] == "category_exists"

    def test_update_renames(self, client: TestClient, catalog: dict):
        category_id = catalog["category"]["id"]

        response = client.put(f"/categories/{category_id}", json={"name": "Gadgets"})

        assert response.status_code == 200
        assert response.json() == {"id": category_id, "name": "Gadgets"}

    def test_missing_category_is_not_found(self, client: TestClient):
        response = client.get("/categories/404")

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Category not found"

    def test_delete_cascades(self, client: TestClient, catalog: dict):
        response = client.delete(f"/categories/{catalog['category']['id']}")

        assert response.status_code == 204
        assert client.get(f"/products/{catalog['product']['id']}").status_code == 404

    def test_list_is_paged(self, client: TestClient):
        for name in ("Electronics", "Clothing", "Food"):
            client.post("/categories", json={"name": name})

        first = client.get("/categories", params={"page": 0, "size": 2}).json()
        second = client.get("/categories", params={"page": 1, "size": 2}).json()

        assert [c["name"] for c in first] == ["Electronics", "Clothing"]
        assert [c["name"] for c in second] == ["Food"]


class TestProducts:
    def test_create_returns_dto_without_nested_category(
        self, client: TestClient, catalog: dict
    ):
        product = catalog["product"]

        assert product["categoryId"] == catalog["category"]["id"]
        assert product["price"] == 999.99
        assert "category" not in product

    def test_create_with_unknown_category(self, client: TestClient):
        response = client.post(
            "/products",
            json={
                "name": "Phone",
                "description": "Flagship phone",
                "price": 1,
                "categoryId": 77,
            },
        )

        assert response.status_code == 404
        assert response.json()["error"]["type"] == "category_not_found"

    def test_malformed_body_is_rejected_locally(self, client: TestClient):
        response = client.post("/products", json={"name": "Phone"})

        assert response.status_code == 422
        assert response.json()["error"]["type"] == "validation_error"

    def test_update_keeps_category(self, client: TestClient, catalog: dict):
        product_id = catalog["product"]["id"]

        response = client.put(
            f"/products/{product_id}",
            json={
                "name": "Phone X",
                "description": "Newer phone",
                "price": 1099.99,
                "categoryId": 99,
            },
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Phone X"
        assert response.json()["categoryId"] == catalog["category"]["id"]

    def test_update_missing_product(self, client: TestClient):
        response = client.put(
            "/products/999",
            json={"name": "Ghost", "description": "Nothing", "price": 1},
        )

        assert response.status_code == 404

    def test_delete_product(self, client: TestClient, catalog: dict):
        product_id = catalog["product"]["id"]

        assert client.delete(f"/products/{product_id}").status_code == 204
        assert client.get(f"/products/{product_id}").status_code == 404

    def test_list_is_paged(self, client: TestClient, catalog: dict):
        category_id = catalog["category"]["id"]
        _add_product(client, category_id, "Laptop", 1499.99)
        _add_product(client, category_id, "Tablet", 499.99)

        page = client.get("/products", params={"page": 1, "size": 2}).json()
        beyond = client.get("/products", params={"page": 5, "size": 2}).json()

        assert [p["name"] for p in page] == ["Tablet"]
        assert beyond == []

    def test_invalid_paging_is_rejected(self, client: TestClient):
        assert client.get("/products", params={"page": -1}).status_code == 422
        assert client.get("/products", params={"size": 0}).status_code == 422

    def test_searches(self, client: TestClient, catalog: dict):
        category_id = catalog["category"]["id"]
        _add_product(client, category_id, "Laptop", 1499.99)

        by_name = client.get("/products/search/name/", params={"keyword": "lap"})
        not_named = client.get(
            "/products/search/name/not-containing/", params={"keyword": "lap"}
        )
        by_description = client.get(
            "/products/search/description/", params={"keyword": "flagship"}
        )
        by_category = client.get(f"/products/search/category/{category_id}")

        assert [p["name"] for p in by_name.json()] == ["Laptop"]
        assert [p["name"] for p in not_named.json()] == ["Phone"]
        assert [p["name"] for p in by_description.json()] == ["Phone"]
        assert len(by_category.json()) == 2


def test_health_reports_supplier(client: TestClient):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["checks"]["supplier_service"]["status"] == "healthy"
