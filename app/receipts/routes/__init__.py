from app.receipts.routes.receipts import router as receipts_router

__all__ = [
    "receipts_router",
]
