"""Tests for product API endpoints."""

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from affiliate_catalog.catalog.models import PREDEFINED_CATEGORIES


def add(client: TestClient, headers: dict[str, str], link: str, category: str):
    """Post a product and return the response."""
    return client.post(
        "/api/products",
        json={"link": link, "category": category},
        headers=headers,
    )


class TestListProducts:
    """Tests for GET /api/products endpoint."""

    def test_empty_catalog(self, client: TestClient) -> None:
        """A fresh catalog lists nothing."""
        response = client.get("/api/products")

        assert response.status_code == 200
        assert response.json() == []

    def test_listing_is_public_and_ordered(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        """Products come back oldest first without authentication."""
        first = add(client, auth_headers, "https://example.com/1", "Books").json()["product"]
        second = add(client, auth_headers, "https://example.com/2", "Electronics").json()["product"]
        client.cookies.clear()

        response = client.get("/api/products")

        assert response.status_code == 200
        assert response.json() == [first, second]

    def test_corrupt_store(self, client: TestClient, products_file: Path) -> None:
        """An unreadable document is a 500 with an error message."""
        products_file.parent.mkdir(parents=True)
        products_file.write_text("{oops", encoding="utf-8")

        response = client.get("/api/products")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to read products"}


class TestAddProduct:
    """Tests for POST /api/products endpoint."""

    def test_add_product_success(
        self, client: TestClient, auth_headers: dict[str, str], products_file: Path
    ) -> None:
        """A valid submission is created and persisted."""
        response = add(client, auth_headers, "https://example.com/item", "  Books ")

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Product added successfully"
        product = data["product"]
        assert product["link"] == "https://example.com/item"
        assert product["category"] == "Books"
        assert product["id"]
        assert product["createdAt"].endswith("Z")

        stored = json.loads(products_file.read_text(encoding="utf-8"))
        assert stored == [product]

    def test_two_adds_have_distinct_ids(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        """Sequential adds get different ids."""
        first = add(client, auth_headers, "https://example.com/1", "Books").json()["product"]
        second = add(client, auth_headers, "https://example.com/2", "Books").json()["product"]

        assert first["id"] != second["id"]
        ids = [p["id"] for p in client.get("/api/products").json()]
        assert ids == [first["id"], second["id"]]

    @pytest.mark.parametrize(
        "body",
        [
            {"link": "", "category": "Books"},
            {"link": "https://example.com", "category": ""},
            {"category": "Books"},
            {"link": "https://example.com"},
            {},
        ],
    )
    def test_missing_fields(
        self, client: TestClient, auth_headers: dict[str, str], body: dict
    ) -> None:
        """Missing fields are a 400 and nothing is stored."""
        response = client.post("/api/products", json=body, headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields: link and category"}
        assert client.get("/api/products").json() == []

    def test_invalid_url(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """A malformed link is a 400."""
        response = add(client, auth_headers, "not a url", "Books")

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid URL format"}

    def test_non_json_body(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """A body that is not JSON is a 400."""
        response = client.post(
            "/api/products",
            content="link=https://example.com",
            headers={**auth_headers, "Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert "error" in response.json()

    def test_requires_auth(self, client: TestClient) -> None:
        """Adding without a session is a 401 and nothing is stored."""
        response = client.post(
            "/api/products",
            json={"link": "https://example.com", "category": "Books"},
        )

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized"}
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert client.get("/api/products").json() == []

    def test_rejects_invalid_token(self, client: TestClient) -> None:
        """A made-up bearer token is a 401."""
        response = add(
            client,
            {"Authorization": "Bearer admin_token_2024"},
            "https://example.com",
            "Books",
        )
        assert response.status_code == 401

    def test_cookie_session_accepted(self, client: TestClient, admin_token: str) -> None:
        """The login cookie alone authorizes the admin."""
        response = client.post(
            "/api/products",
            json={"link": "https://example.com/item", "category": "Books"},
        )
        assert response.status_code == 200

    def test_storage_failure(
        self, client: TestClient, auth_headers: dict[str, str], products_file: Path
    ) -> None:
        """A corrupt document makes the add fail with a 500."""
        products_file.parent.mkdir(parents=True)
        products_file.write_text("not json", encoding="utf-8")

        response = add(client, auth_headers, "https://example.com/item", "Books")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to add product"}
        assert products_file.read_text(encoding="utf-8") == "not json"


class TestDeleteProduct:
    """Tests for DELETE /api/products/{id} endpoint."""

    def test_delete_product(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """Deleting removes the product from later listings."""
        keep = add(client, auth_headers, "https://example.com/1", "Books").json()["product"]
        drop = add(client, auth_headers, "https://example.com/2", "Books").json()["product"]

        response = client.delete(f"/api/products/{drop['id']}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Product deleted successfully", "product": drop}
        assert client.get("/api/products").json() == [keep]

    def test_delete_unknown(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """Unknown ids are a 404."""
        response = client.delete("/api/products/123", headers=auth_headers)

        assert response.status_code == 404
        assert "error" in response.json()

    def test_delete_requires_auth(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        """Deleting without a session is a 401 and keeps the product."""
        product = add(client, auth_headers, "https://example.com/1", "Books").json()["product"]
        client.cookies.clear()

        response = client.delete(f"/api/products/{product['id']}")

        assert response.status_code == 401
        assert len(client.get("/api/products").json()) == 1


class TestListCategories:
    """Tests for GET /api/categories endpoint."""

    def test_categories(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        """Suggestions are merged with categories in use."""
        add(client, auth_headers, "https://example.com/1", "Pet Supplies")

        response = client.get("/api/categories")

        assert response.status_code == 200
        categories = response.json()["categories"]
        assert "Pet Supplies" in categories
        assert set(PREDEFINED_CATEGORIES) <= set(categories)
