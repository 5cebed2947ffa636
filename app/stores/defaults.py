"""
The storefront every new domain starts from.
"""

from app.stores.schemas.store import Product, StoreConfig, StoreTheme

DEFAULT_STORE_ID = "default"
DEFAULT_STORE_SLUG = "emporio-padrao"

DEFAULT_STORE_CONFIG = StoreConfig(
    id=DEFAULT_STORE_ID,
    slug=DEFAULT_STORE_SLUG,
    store_name="O Empório do Dragão Dourado",
    store_tagline="Fornecedor Oficial do Reino de Arton",
    theme=StoreTheme(
        primary_color="#d4af37",
        secondary_color="#1c1917",
        accent_color="#facc15",
        background_color="#0c0a09",
        card_color="#1c1917",
        parchment_color="#f5e6c8",
        ink_color="#3a2a1d",
        border_radius="12px",
        font_family="Cinzel",
        layout_type="grid",
        show_banner=True,
        banner_image=(
            "https://images.unsplash.com/photo-1578662996442-48f60103fc96"
            "?auto=format&fit=crop&q=80&w=1200"
        ),
        logo_image="",
        glassmorphism=True,
    ),
    products=[
        Product(
            id="1",
            name="Espada Longa do Valente",
            description="Uma lâmina de aço forjada por anões nas profundezas de Erebor.",
            price=150,
            category="weapon",
            image=(
                "https://images.unsplash.com/photo-1589131008221-9fd440d91814"
                "?auto=format&fit=crop&q=80&w=400"
            ),
            rarity="uncommon",
        ),
        Product(
            id="2",
            name="Poção de Vida Maior",
            description="Restaura 50 pontos de vida. Contém extrato de erva-de-fogo.",
            price=45,
            category="potion",
            image=(
                "https://images.unsplash.com/photo-1514467958571-337553f19114"
                "?auto=format&fit=crop&q=80&w=400"
            ),
            rarity="common",
        ),
    ],
)


def default_store_config(**overrides: object) -> StoreConfig:
    """Return an independent copy of the default storefront with ``overrides`` applied."""
    return DEFAULT_STORE_CONFIG.model_copy(update=overrides, deep=True)
