"""
Store service: persistence of storefront documents.

Documents are keyed by an opaque ``id`` and a unique ``slug``. Saving is an
upsert by id that replaces the whole document, catalog included; concurrent
editors simply overwrite each other.
"""

import time
from urllib.parse import urlencode

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.constants import NEW_STORE_NAME, NEW_STORE_SLUG_PREFIX, STORE_SLUG_PARAM
from app.core.exceptions import ConflictError, NotFoundError
from app.core.repository import BaseRepository
from app.stores.defaults import DEFAULT_STORE_CONFIG, default_store_config
from app.stores.models.store import Store, StoreProduct
from app.stores.schemas.store import StoreConfig

logger = structlog.get_logger(__name__)


class StoreRepository(BaseRepository[Store]):
    def __init__(self, db: Session):
        super().__init__(db, Store)

    def find_by_slug(self, slug: str) -> Store | None:
        return self.db.query(Store).filter(Store.slug == slug).first()

    def list_ordered(self) -> list[Store]:
        return self.db.query(Store).order_by(Store.created_at.asc(), Store.id.asc()).all()

    def slug_taken_by_other(self, slug: str, store_id: str) -> bool:
        return (
            self.db.query(Store.id).filter(Store.slug == slug, Store.id != store_id).first()
            is not None
        )


class StoreService:
    """Service for listing, saving and deleting storefronts."""

    def __init__(self, db: Session):
        self.db = db
        self.repository = StoreRepository(db)

    def list_stores(self, seed_if_empty: bool = False) -> list[Store]:
        """All stores, oldest first. An empty database can be given the default store."""
        stores = self.repository.list_ordered()
        if not stores and seed_if_empty:
            default_store = self.ensure_default_store()
            stores = [default_store] if default_store else []
        return stores

    def get_by_slug(self, slug: str) -> Store:
        store = self.repository.find_by_slug(slug)
        if not store:
            raise NotFoundError("Loja não encontrada", resource="store")
        return store

    def get_by_id(self, store_id: str) -> Store:
        store = self.repository.get_by_id(store_id)
        if not store:
            raise NotFoundError("Loja não encontrada", resource="store")
        return store

    def upsert_store(self, config: StoreConfig) -> Store:
        """
        Create the store or replace it entirely, matched by ``config.id``.

        Raises:
            ConflictError: If the slug already belongs to another store
        """
        if self.repository.slug_taken_by_other(config.slug, config.id):
            raise ConflictError(f"Slug já em uso: {config.slug}", resource="store")

        store = self.repository.get_by_id(config.id)
        created = store is None
        if store is None:
            store = Store(id=config.id)
            self.db.add(store)

        store.slug = config.slug
        store.store_name = config.store_name
        store.store_tagline = config.store_tagline
        store.theme = config.theme.model_dump(by_alias=True)

        # Old rows must be gone before the new ones hit uq_store_product
        store.products.clear()
        self.db.flush()

        for position, product in enumerate(config.products):
            store.products.append(
                StoreProduct(
                    product_id=product.id,
                    name=product.name,
                    description=product.description,
                    price=product.price,
                    category=product.category,
                    image=product.image,
                    rarity=product.rarity,
                    stock=product.stock,
                    sort_order=position,
                )
            )

        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictError(f"Slug já em uso: {config.slug}", resource="store") from e

        self.db.refresh(store)
        logger.info(
            "store_upserted",
            store_id=store.id,
            slug=store.slug,
            created=created,
            product_count=len(config.products),
        )
        return store

    def create_store(self, now_ms: int | None = None) -> Store:
        """Create a new storefront from the defaults, named and slugged after its id."""
        store_id = str(now_ms if now_ms is not None else int(time.time() * 1000))
        config = default_store_config(
            id=store_id,
            slug=f"{NEW_STORE_SLUG_PREFIX}-{store_id[-4:]}",
            store_name=NEW_STORE_NAME,
        )
        return self.upsert_store(config)

    def delete_store(self, store_id: str) -> bool:
        """Delete a store by id. Deleting a missing store is not an error."""
        store = self.repository.get_by_id(store_id)
        if not store:
            logger.info("store_delete_missing", store_id=store_id)
            return False

        self.repository.delete(store)
        logger.info("store_deleted", store_id=store_id)
        return True

    def ensure_default_store(self) -> Store | None:
        """Seed the default storefront when the backing store holds none."""
        if self.repository.count() > 0:
            return None
        logger.info("seeding_default_store", slug=DEFAULT_STORE_CONFIG.slug)
        return self.upsert_store(default_store_config())

    @staticmethod
    def share_url(slug: str) -> str:
        """Link that opens the storefront directly, e.g. https://host/?s=emporio-padrao"""
        return f"{settings.FRONTEND_URL.rstrip('/')}/?{urlencode({STORE_SLUG_PARAM: slug})}"

    @staticmethod
    def display_host(slug: str) -> str:
        return f"{slug}.{settings.STORE_DOMAIN_SUFFIX}"
