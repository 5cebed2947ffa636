from app.stores.models.store import Store, StoreProduct

__all__ = [
    "Store",
    "StoreProduct",
]
