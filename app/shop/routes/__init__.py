from app.shop.routes.checkout import router as checkout_router

__all__ = [
    "checkout_router",
]
