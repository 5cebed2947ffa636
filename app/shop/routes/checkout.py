"""
Cart pricing and checkout endpoints of a storefront.
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.rate_limit import limiter
from app.db.session import get_db
from app.receipts.schemas.receipt import Receipt
from app.shop.schemas.checkout import CartLineResponse, CartRequest, CartResponse, CheckoutRequest
from app.shop.services.checkout_service import CheckoutService

router = APIRouter(prefix="/stores", tags=["checkout"])


@router.post("/{slug}/cart", response_model=CartResponse)
def price_cart(slug: str, cart_request: CartRequest, db: Session = Depends(get_db)) -> CartResponse:
    """Price a cart against the store catalog. Repeated products are merged."""
    cart = CheckoutService(db).price_cart(slug, cart_request.items)
    return CartResponse(
        lines=[
            CartLineResponse(
                product_id=item.product.id,
                name=item.product.name,
                quantity=item.quantity,
                unit_price=item.product.price,
                line_total=item.line_total,
            )
            for item in cart.items
        ],
        total=cart.total,
        item_count=cart.item_count,
    )


@router.post("/{slug}/checkout", response_model=Receipt)
@limiter.limit(settings.CHECKOUT_RATE_LIMIT)
async def checkout(
    request: Request,
    slug: str,
    checkout_request: CheckoutRequest,
    db: Session = Depends(get_db),
) -> Receipt:
    """
    Pay for a cart with the gold the buyer declares and receive a receipt.

    Raises:
        400: Empty cart, unknown product, or budget below the total
        404: Store not found
    """
    return CheckoutService(db).checkout(slug, checkout_request)
