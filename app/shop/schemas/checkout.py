"""
Pydantic schemas for cart pricing and checkout.
"""

from pydantic import Field

from app.receipts.schemas.receipt import CustomerDetails
from app.stores.schemas.store import CamelModel


class CartLineRequest(CamelModel):
    product_id: str = Field(..., min_length=1)
    quantity: int = Field(default=1, ge=1, le=999)


class CartRequest(CamelModel):
    items: list[CartLineRequest] = Field(default_factory=list)


class CartLineResponse(CamelModel):
    product_id: str
    name: str
    quantity: int
    unit_price: int
    line_total: int


class CartResponse(CamelModel):
    lines: list[CartLineResponse]
    total: int
    item_count: int


class CheckoutRequest(CamelModel):
    """Checkout form: who is buying, what they carry in their purse and what they take."""

    customer: CustomerDetails
    budget: int = Field(..., ge=0, description="Gold pieces the buyer declares (PO na Bolsa)")
    items: list[CartLineRequest] = Field(..., min_length=1)
