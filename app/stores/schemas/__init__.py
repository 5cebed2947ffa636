from app.stores.schemas.store import (
    Product,
    StoreConfig,
    StoreDeletedResponse,
    StoreResponse,
    StoreShareResponse,
    StoreTheme,
    ThemeVariablesResponse,
)

__all__ = [
    "Product",
    "StoreConfig",
    "StoreDeletedResponse",
    "StoreResponse",
    "StoreShareResponse",
    "StoreTheme",
    "ThemeVariablesResponse",
]
