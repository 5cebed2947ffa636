"""
Tests for receipt routes.
"""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.core.config import settings
from app.core.exceptions import register_exception_handlers
from app.core.rate_limit import limiter
from app.receipts.routes import receipts_router
from app.shop.services.checkout_service import receipt_verify_url


class TestVerifyReceipt:
    """Tests for POST /api/receipts/verify"""

    @pytest.mark.asyncio
    async def test_valid_token(self, test_client: AsyncClient):
        response = await test_client.post(
            "/api/receipts/verify", json={"token": "RPG-ABCD-EFGH-9534"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["valid"] is True
        assert data["status"] == "valid"
        assert data["reason"] is None
        assert data["headline"] == "Documento Legítimo"

    @pytest.mark.asyncio
    async def test_lowercase_input_is_normalized(self, test_client: AsyncClient):
        response = await test_client.post(
            "/api/receipts/verify", json={"token": "  rpg-abcd-efgh-9534 "}
        )

        data = response.json()
        assert data["valid"] is True
        assert data["token"] == "RPG-ABCD-EFGH-9534"

    @pytest.mark.asyncio
    async def test_checksum_failure(self, test_client: AsyncClient):
        response = await test_client.post(
            "/api/receipts/verify", json={"token": "RPG-ABCD-EFGH-9533"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["valid"] is False
        assert data["status"] == "invalid"
        assert data["reason"] == "checksum"

    @pytest.mark.asyncio
    async def test_format_failure(self, test_client: AsyncClient):
        response = await test_client.post("/api/receipts/verify", json={"token": "RPG-AB-EFGH-9534"})

        data = response.json()
        assert data["valid"] is False
        assert data["reason"] == "format"

    @pytest.mark.asyncio
    async def test_missing_token_is_idle(self, test_client: AsyncClient):
        response = await test_client.post("/api/receipts/verify", json={})

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "idle"
        assert data["valid"] is False


class TestVerifyReceiptLink:
    """Tests for GET /api/receipts/verify/{token}"""

    @pytest.mark.asyncio
    async def test_link_verifies_token(self, test_client: AsyncClient):
        response = await test_client.get("/api/receipts/verify/RPG-QWER-TYUI-3981")

        assert response.status_code == 200
        assert response.json()["valid"] is True

    @pytest.mark.asyncio
    async def test_link_with_forged_token(self, test_client: AsyncClient):
        response = await test_client.get("/api/receipts/verify/RPG-QWER-TYUI-3982")

        assert response.json()["valid"] is False

    @pytest.mark.asyncio
    async def test_receipt_link_follows_api_prefix(self, test_app, monkeypatch):
        """Receipt links point at wherever the API is mounted."""
        monkeypatch.setattr(settings, "API_PREFIX", "/v2")
        app = FastAPI()
        app.state.limiter = limiter
        register_exception_handlers(app)
        app.include_router(receipts_router, prefix=settings.API_PREFIX)

        url = receipt_verify_url("RPG-ABCD-EFGH-9534")

        assert url == "http://test/v2/receipts/verify/RPG-ABCD-EFGH-9534"
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.get(url)
        assert response.status_code == 200
        assert response.json()["valid"] is True


class TestDownloadReceiptDocument:
    """Tests for POST /api/receipts/document"""

    @pytest.mark.asyncio
    async def test_checkout_receipt_downloads_as_pdf(self, test_client: AsyncClient, default_store):
        checkout = await test_client.post(
            "/api/stores/emporio-padrao/checkout",
            json={
                "customer": {"name": "João Ninguém", "characterClass": "Bardo"},
                "budget": 200,
                "items": [{"productId": "2", "quantity": 1}],
            },
        )
        assert checkout.status_code == 200

        response = await test_client.post("/api/receipts/document", json=checkout.json())

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        disposition = response.headers["content-disposition"]
        assert 'filename="Recibo_Jo_o_Ningu_m.pdf"' in disposition
        assert "filename*=UTF-8''Recibo_Jo%C3%A3o_Ningu%C3%A9m.pdf" in disposition
        assert response.content.startswith(b"%PDF")

    @pytest.mark.asyncio
    async def test_unknown_store_uses_default_theme(self, test_client: AsyncClient):
        receipt = {
            "storeName": "Loja Fantasma",
            "storeSlug": "nao-existe",
            "customer": {"name": "Ezio", "characterClass": "Ladino"},
            "lines": [
                {"productId": "1", "name": "Adaga", "quantity": 1, "unitPrice": 5, "lineTotal": 5}
            ],
            "total": 5,
            "paid": 5,
            "change": 0,
            "flavorText": "",
            "receiptId": "RPG-ABCD-EFGH-9534",
            "verifyUrl": "http://test/api/receipts/verify/RPG-ABCD-EFGH-9534",
            "issuedAt": "2026-01-01T00:00:00+00:00",
        }

        response = await test_client.post("/api/receipts/document", json=receipt)

        assert response.status_code == 200
        assert response.content.startswith(b"%PDF")

    @pytest.mark.asyncio
    async def test_forged_token_is_refused(self, test_client: AsyncClient):
        receipt = {
            "storeName": "Loja",
            "storeSlug": "loja",
            "customer": {"name": "Ezio", "characterClass": "Ladino"},
            "lines": [],
            "total": 0,
            "paid": 0,
            "change": 0,
            "receiptId": "RPG-ABCD-EFGH-9999",
            "verifyUrl": "http://test/api/receipts/verify/RPG-ABCD-EFGH-9999",
            "issuedAt": "2026-01-01T00:00:00+00:00",
        }

        response = await test_client.post("/api/receipts/document", json=receipt)

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["details"] == {"field": "receiptId"}


class TestVerifyRateLimit:
    @pytest.fixture
    def rate_limited(self, test_app):
        limiter.reset()
        limiter.enabled = True
        yield
        limiter.enabled = False
        limiter.reset()

    @pytest.mark.asyncio
    async def test_too_many_verifications(self, test_client: AsyncClient, rate_limited):
        allowed = int(settings.VERIFY_RATE_LIMIT.split("/")[0])
        for _ in range(allowed):
            response = await test_client.get("/api/receipts/verify/RPG-ABCD-EFGH-9534")
            assert response.status_code == 200

        response = await test_client.get("/api/receipts/verify/RPG-ABCD-EFGH-9534")

        assert response.status_code == 429
        data = response.json()
        assert data["success"] is False
        assert data["error"]["code"] == "RATE_LIMIT_EXCEEDED"
