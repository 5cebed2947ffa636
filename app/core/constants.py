"""Application-wide constants.

This module centralizes storefront copy and magic values used across
multiple modules. For environment-specific configuration, see config.py.
"""

# =============================================================================
# Admin mode
# =============================================================================

# Admin mode is a URL flag (?role=adm), not an authenticated role
ADMIN_ROLE_PARAM: str = "role"
ADMIN_ROLE_VALUE: str = "adm"

# =============================================================================
# Storefront links
# =============================================================================

# Query parameter that opens a storefront directly: /?s=<slug>
STORE_SLUG_PARAM: str = "s"

# New stores are created from the defaults under this name and slug prefix
NEW_STORE_NAME: str = "Nova Loja RPG"
NEW_STORE_SLUG_PREFIX: str = "loja"

# =============================================================================
# Checkout
# =============================================================================

CHARACTER_CLASSES: tuple[str, ...] = (
    "Guerreiro",
    "Mago",
    "Ladino",
    "Clérigo",
    "Bardo",
    "Paladino",
    "Ranger",
    "Druida",
    "Monge",
)

FLAVOR_TEXTS: tuple[str, ...] = (
    "Cuidado com os mímicos disfarçados de baús!",
    "Este recibo é válido em todos os planos materiais conhecidos.",
    "O Empório não se responsabiliza por perdas de membros em combate.",
    "Que a sorte dos dados acompanhe seus passos.",
)

CURRENCY_LABEL: str = "PO"

# Verify route under API_PREFIX; QR payload target
RECEIPT_VERIFY_PATH: str = "/receipts/verify"
