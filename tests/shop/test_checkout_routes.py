"""
Tests for cart and checkout routes.
"""

import pytest
from httpx import AsyncClient

from app.receipts.token import validate_receipt_token
from app.stores.models.store import Store


def checkout_body(budget: int, items: list[dict], character_class: str = "Mago") -> dict:
    return {
        "customer": {"name": "Gandalf", "characterClass": character_class, "guild": "Istari"},
        "budget": budget,
        "items": items,
    }


class TestPriceCart:
    """Tests for POST /api/stores/{slug}/cart"""

    @pytest.mark.asyncio
    async def test_prices_and_merges_lines(self, test_client: AsyncClient, default_store: Store):
        response = await test_client.post(
            f"/api/stores/{default_store.slug}/cart",
            json={
                "items": [
                    {"productId": "2", "quantity": 1},
                    {"productId": "1", "quantity": 1},
                    {"productId": "2", "quantity": 2},
                ]
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 150 + 3 * 45
        assert data["itemCount"] == 4
        assert [line["productId"] for line in data["lines"]] == ["2", "1"]
        assert data["lines"][0]["lineTotal"] == 135

    @pytest.mark.asyncio
    async def test_empty_cart(self, test_client: AsyncClient, default_store: Store):
        response = await test_client.post(f"/api/stores/{default_store.slug}/cart", json={})

        assert response.status_code == 200
        assert response.json() == {"lines": [], "total": 0, "itemCount": 0}


class TestCheckout:
    """Tests for POST /api/stores/{slug}/checkout"""

    @pytest.mark.asyncio
    async def test_successful_checkout(self, test_client: AsyncClient, default_store: Store):
        response = await test_client.post(
            f"/api/stores/{default_store.slug}/checkout",
            json=checkout_body(200, [{"productId": "1", "quantity": 1}]),
        )

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 150
        assert data["paid"] == 200
        assert data["change"] == 50
        assert data["currency"] == "PO"
        assert data["customer"]["characterClass"] == "Mago"
        assert validate_receipt_token(data["receiptId"])
        assert data["verifyUrl"].endswith(data["receiptId"])
        assert data["issuedAt"].endswith("Z")

    @pytest.mark.asyncio
    async def test_insufficient_budget(self, test_client: AsyncClient, default_store: Store):
        response = await test_client.post(
            f"/api/stores/{default_store.slug}/checkout",
            json=checkout_body(10, [{"productId": "1", "quantity": 1}]),
        )

        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["error"]["code"] == "VALIDATION_ERROR"
        assert data["error"]["details"] == {"field": "budget"}

    @pytest.mark.asyncio
    async def test_unknown_product(self, test_client: AsyncClient, default_store: Store):
        response = await test_client.post(
            f"/api/stores/{default_store.slug}/checkout",
            json=checkout_body(1000, [{"productId": "999", "quantity": 1}]),
        )

        assert response.status_code == 400
        assert response.json()["error"]["details"] == {"field": "items"}

    @pytest.mark.asyncio
    async def test_unknown_character_class(self, test_client: AsyncClient, default_store: Store):
        response = await test_client.post(
            f"/api/stores/{default_store.slug}/checkout",
            json=checkout_body(1000, [{"productId": "1"}], character_class="Astronauta"),
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_empty_items_rejected(self, test_client: AsyncClient, default_store: Store):
        response = await test_client.post(
            f"/api/stores/{default_store.slug}/checkout", json=checkout_body(1000, [])
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_unknown_store(self, test_client: AsyncClient):
        response = await test_client.post(
            "/api/stores/nowhere/checkout",
            json=checkout_body(1000, [{"productId": "1", "quantity": 1}]),
        )

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"
