"""
Pydantic schemas for storefront documents.

Field names travel as camelCase on the wire (``storeName``, ``primaryColor``)
to match the document format the storefront edits; snake_case is accepted
on input as well.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from app.core.datetime_utils import UTCDatetime

Category = Literal["weapon", "armor", "potion", "misc", "scroll", "artifact"]
Rarity = Literal["common", "uncommon", "rare", "epic", "legendary"]
FontFamily = Literal["Cinzel", "Lato", "Serif", "Monospace"]
LayoutType = Literal["grid", "list", "compact"]

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"
# Theme values end up inside a stylesheet
CSS_VALUE_PATTERN = r"^[^;{}<>]*$"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StoreTheme(CamelModel):
    primary_color: str = Field(default="#d4af37", max_length=64, pattern=CSS_VALUE_PATTERN)
    secondary_color: str = Field(default="#1c1917", max_length=64, pattern=CSS_VALUE_PATTERN)
    accent_color: str = Field(default="#facc15", max_length=64, pattern=CSS_VALUE_PATTERN)
    background_color: str = Field(default="#0c0a09", max_length=64, pattern=CSS_VALUE_PATTERN)
    card_color: str = Field(default="#1c1917", max_length=64, pattern=CSS_VALUE_PATTERN)
    parchment_color: str = Field(default="#f5e6c8", max_length=64, pattern=CSS_VALUE_PATTERN)
    ink_color: str = Field(default="#3a2a1d", max_length=64, pattern=CSS_VALUE_PATTERN)
    border_radius: str = Field(default="12px", max_length=32, pattern=CSS_VALUE_PATTERN)
    font_family: FontFamily = "Cinzel"
    layout_type: LayoutType = "grid"
    show_banner: bool = True
    banner_image: str = ""
    logo_image: str = ""
    glassmorphism: bool = True


class Product(CamelModel):
    id: str = Field(..., min_length=1, max_length=64)
    name: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    price: int = Field(..., ge=0, description="Price in gold pieces (PO)")
    category: Category
    image: str = ""
    rarity: Rarity | None = None
    stock: int | None = Field(default=None, ge=0)


class StoreConfig(CamelModel):
    """Full storefront document, as saved by the editor."""

    id: str = Field(..., min_length=1, max_length=64)
    slug: str = Field(..., min_length=1, max_length=64, pattern=SLUG_PATTERN)
    store_name: str = Field(default="", max_length=200)
    store_tagline: str = Field(default="", max_length=300)
    theme: StoreTheme = Field(default_factory=StoreTheme)
    products: list[Product] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_product_ids(self) -> "StoreConfig":
        seen: set[str] = set()
        for product in self.products:
            if product.id in seen:
                raise ValueError(f"Duplicate product id: {product.id}")
            seen.add(product.id)
        return self


class StoreResponse(StoreConfig):
    created_at: UTCDatetime | None = None
    updated_at: UTCDatetime | None = None

    @classmethod
    def from_model(cls, obj: Any) -> "StoreResponse":
        """Build the document from a Store row, mapping product rows back to catalog ids."""
        return cls(
            id=obj.id,
            slug=obj.slug,
            store_name=obj.store_name,
            store_tagline=obj.store_tagline,
            theme=StoreTheme.model_validate(obj.theme or {}),
            products=[
                Product(
                    id=p.product_id,
                    name=p.name,
                    description=p.description,
                    price=p.price,
                    category=p.category,
                    image=p.image,
                    rarity=p.rarity,
                    stock=p.stock,
                )
                for p in obj.products
            ],
            created_at=obj.created_at,
            updated_at=obj.updated_at,
        )


class StoreShareResponse(CamelModel):
    slug: str
    url: str
    display_host: str


class StoreDeletedResponse(BaseModel):
    message: str


class ThemeVariablesResponse(CamelModel):
    slug: str
    variables: dict[str, str]
