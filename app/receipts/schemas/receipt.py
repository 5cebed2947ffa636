"""
Pydantic schemas for receipts and receipt verification.
"""

from pydantic import Field, field_validator

from app.core.constants import CHARACTER_CLASSES, CURRENCY_LABEL
from app.core.datetime_utils import UTCDatetime
from app.stores.schemas.store import CamelModel


class CustomerDetails(CamelModel):
    name: str = Field(..., min_length=1, max_length=100, description="Adventurer name")
    character_class: str = Field(default=CHARACTER_CLASSES[0], description="Character class")
    guild: str | None = Field(default=None, max_length=100)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name must not be blank")
        return value

    @field_validator("character_class")
    @classmethod
    def _known_class(cls, value: str) -> str:
        if value not in CHARACTER_CLASSES:
            raise ValueError(f"Unknown character class: {value}")
        return value


class ReceiptLine(CamelModel):
    product_id: str
    name: str
    quantity: int = Field(..., ge=1)
    unit_price: int = Field(..., ge=0)
    line_total: int = Field(..., ge=0)


class Receipt(CamelModel):
    """A completed purchase. Receipts are returned to the buyer and never stored."""

    store_name: str
    store_slug: str
    customer: CustomerDetails
    lines: list[ReceiptLine]
    total: int = Field(..., ge=0)
    paid: int = Field(..., ge=0)
    change: int = Field(..., ge=0)
    currency: str = CURRENCY_LABEL
    flavor_text: str = ""
    receipt_id: str = Field(..., description="Receipt token, RPG-XXXX-YYYY-DDDD")
    verify_url: str = Field(..., description="Verification link, suitable as a QR payload")
    issued_at: UTCDatetime


class VerifyRequest(CamelModel):
    token: str | None = Field(default=None, description="Receipt token as typed by the user")


class VerifyResponse(CamelModel):
    token: str
    valid: bool
    status: str
    reason: str | None = Field(default=None, description="Failed check: format or checksum")
    headline: str
    message: str
