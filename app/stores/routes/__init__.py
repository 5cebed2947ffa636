from app.stores.routes.stores import router as stores_router

__all__ = [
    "stores_router",
]
