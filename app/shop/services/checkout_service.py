"""
Checkout service: prices a cart against a store catalog and issues receipts.
"""

import random

import structlog
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.constants import FLAVOR_TEXTS, RECEIPT_VERIFY_PATH
from app.core.datetime_utils import utc_now
from app.core.exceptions import ValidationError
from app.receipts.schemas.receipt import Receipt, ReceiptLine
from app.receipts.token import RandomSource, generate_receipt_token
from app.shop.cart import Cart
from app.shop.schemas.checkout import CartLineRequest, CheckoutRequest
from app.stores.models.store import Store
from app.stores.schemas.store import Product, StoreResponse
from app.stores.services.store_service import StoreService

logger = structlog.get_logger(__name__)


def receipt_verify_url(token: str) -> str:
    """Public link that verifies ``token``; this is what the receipt QR code encodes."""
    base = settings.FRONTEND_URL.rstrip("/")
    return f"{base}{settings.API_PREFIX.rstrip('/')}{RECEIPT_VERIFY_PATH}/{token}"


class CheckoutService:
    """Service for cart pricing and checkout."""

    def __init__(self, db: Session, rng: RandomSource | None = None):
        self.db = db
        self.store_service = StoreService(db)
        # None keeps the CSPRNG default for tokens
        self.rng = rng

    def build_cart(self, store: Store, lines: list[CartLineRequest]) -> Cart:
        """
        Build a cart from requested lines, merging repeated products.

        Raises:
            ValidationError: If a product is not in the store catalog
        """
        catalog: dict[str, Product] = {
            product.id: product for product in StoreResponse.from_model(store).products
        }

        cart = Cart()
        for line in lines:
            product = catalog.get(line.product_id)
            if product is None:
                raise ValidationError(
                    f"Produto não encontrado nesta loja: {line.product_id}", field="items"
                )
            cart = cart.add(product, line.quantity)
        return cart

    def price_cart(self, slug: str, lines: list[CartLineRequest]) -> Cart:
        store = self.store_service.get_by_slug(slug)
        return self.build_cart(store, lines)

    def checkout(self, slug: str, request: CheckoutRequest) -> Receipt:
        """
        Complete a purchase and issue a receipt.

        Steps:
        1. Resolve the store and build the cart
        2. Check the declared budget covers the total
        3. Issue a receipt with a fresh token and a flavor text

        The receipt, token included, is not persisted.

        Raises:
            NotFoundError: If the store does not exist
            ValidationError: If the cart is empty, has unknown products,
                or the budget is below the total
        """
        store = self.store_service.get_by_slug(slug)
        cart = self.build_cart(store, request.items)

        if cart.is_empty:
            raise ValidationError("O carrinho está vazio", field="items")

        if not cart.can_afford(request.budget):
            raise ValidationError(
                f"Ouro insuficiente: total {cart.total}, bolsa {request.budget}",
                field="budget",
            )

        picker = self.rng if self.rng is not None else random
        token = generate_receipt_token(self.rng)

        receipt = Receipt(
            store_name=store.store_name,
            store_slug=store.slug,
            customer=request.customer,
            lines=[
                ReceiptLine(
                    product_id=item.product.id,
                    name=item.product.name,
                    quantity=item.quantity,
                    unit_price=item.product.price,
                    line_total=item.line_total,
                )
                for item in cart.items
            ],
            total=cart.total,
            paid=request.budget,
            change=request.budget - cart.total,
            flavor_text=picker.choice(FLAVOR_TEXTS),
            receipt_id=token,
            verify_url=receipt_verify_url(token),
            issued_at=utc_now(),
        )

        logger.info(
            "checkout_completed",
            store_slug=store.slug,
            total=cart.total,
            item_count=cart.item_count,
        )
        return receipt
