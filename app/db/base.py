"""
Database base module - imports all models so they register on Base.metadata.

While the imports appear unused, ``Base.metadata.create_all`` only knows
about tables whose models have been imported.
"""

from app.stores.models.store import Store, StoreProduct

__all__ = [
    "Store",
    "StoreProduct",
]
