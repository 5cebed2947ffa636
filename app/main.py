from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from app.core.config import settings
from app.core.exceptions import register_exception_handlers
from app.core.log_config import RequestLoggingMiddleware, setup_logging
from app.core.rate_limit import limiter
from app.db import base  # noqa: F401 - registers models on Base.metadata
from app.db.session import Base, SessionLocal, engine
from app.receipts.routes import receipts_router
from app.shop.routes import checkout_router
from app.stores.routes import stores_router
from app.stores.services.store_service import StoreService

setup_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("creating_tables")
    Base.metadata.create_all(bind=engine)

    if settings.SEED_DEFAULT_STORE:
        db = SessionLocal()
        try:
            StoreService(db).ensure_default_store()
        except Exception as e:
            logger.error("default_store_seed_failed", error=str(e))
        finally:
            db.close()

    yield

    logger.info("disposing_engine")
    engine.dispose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    debug=settings.DEBUG,
    lifespan=lifespan,
    description="Themed storefronts with verifiable receipt tokens",
    version="1.0.0",
)

app.state.limiter = limiter
register_exception_handlers(app, debug=settings.DEBUG)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

app.include_router(stores_router, prefix=settings.API_PREFIX, tags=["stores"])
app.include_router(checkout_router, prefix=settings.API_PREFIX, tags=["checkout"])
app.include_router(receipts_router, prefix=settings.API_PREFIX, tags=["receipts"])


@app.get("/")
async def root() -> dict[str, str]:
    return {"message": settings.PROJECT_NAME, "version": "1.0.0", "status": "running"}


@app.get("/health")
async def health_check() -> dict[str, str]:
    db_status = "unknown"

    try:
        db = SessionLocal()
        try:
            db.execute(text("SELECT 1"))
            db_status = "healthy"
        finally:
            db.close()
    except Exception:
        db_status = "unhealthy"

    overall = "healthy" if db_status == "healthy" else "degraded"
    return {"status": overall, "database": db_status}
