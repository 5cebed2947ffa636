"""
Storefront ("domain") API endpoints.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from app.core.config import settings
from app.db.session import get_db
from app.stores.dependencies import require_admin_mode
from app.stores.schemas.store import (
    StoreConfig,
    StoreDeletedResponse,
    StoreResponse,
    StoreShareResponse,
    StoreTheme,
    ThemeVariablesResponse,
)
from app.stores.services.store_service import StoreService
from app.stores.services.theme import render_theme_css, theme_css_variables

router = APIRouter(prefix="/stores", tags=["stores"])


@router.get("", response_model=list[StoreResponse])
def list_stores(db: Session = Depends(get_db)) -> list[StoreResponse]:
    """List every storefront, oldest first."""
    stores = StoreService(db).list_stores(seed_if_empty=settings.SEED_DEFAULT_STORE)
    return [StoreResponse.from_model(store) for store in stores]


# Admin endpoints - require ?role=adm


@router.post("", response_model=StoreResponse, dependencies=[Depends(require_admin_mode)])
def save_store(config: StoreConfig, db: Session = Depends(get_db)) -> StoreResponse:
    """
    Save a storefront document: updates the store with this id, or creates it.

    Raises:
        409: Slug already used by another store
    """
    store = StoreService(db).upsert_store(config)
    return StoreResponse.from_model(store)


@router.post(
    "/new",
    response_model=StoreResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin_mode)],
)
def create_store(db: Session = Depends(get_db)) -> StoreResponse:
    """Create a new storefront from the default template."""
    store = StoreService(db).create_store()
    return StoreResponse.from_model(store)


@router.delete(
    "/{store_id}",
    response_model=StoreDeletedResponse,
    dependencies=[Depends(require_admin_mode)],
)
def delete_store(store_id: str, db: Session = Depends(get_db)) -> StoreDeletedResponse:
    StoreService(db).delete_store(store_id)
    return StoreDeletedResponse(message="Removido com sucesso")


# Public endpoints with path parameters


@router.get("/{slug}", response_model=StoreResponse)
def get_store(slug: str, db: Session = Depends(get_db)) -> StoreResponse:
    """
    Get a storefront by slug.

    Raises:
        404: Store not found
    """
    return StoreResponse.from_model(StoreService(db).get_by_slug(slug))


@router.get("/{slug}/share", response_model=StoreShareResponse)
def get_store_share_link(slug: str, db: Session = Depends(get_db)) -> StoreShareResponse:
    store = StoreService(db).get_by_slug(slug)
    return StoreShareResponse(
        slug=store.slug,
        url=StoreService.share_url(store.slug),
        display_host=StoreService.display_host(store.slug),
    )


@router.get("/{slug}/theme", response_model=ThemeVariablesResponse)
def get_store_theme_variables(slug: str, db: Session = Depends(get_db)) -> ThemeVariablesResponse:
    store = StoreService(db).get_by_slug(slug)
    theme = StoreTheme.model_validate(store.theme or {})
    return ThemeVariablesResponse(slug=store.slug, variables=theme_css_variables(theme))


@router.get("/{slug}/theme.css", response_class=PlainTextResponse)
def get_store_theme_css(slug: str, db: Session = Depends(get_db)) -> PlainTextResponse:
    store = StoreService(db).get_by_slug(slug)
    theme = StoreTheme.model_validate(store.theme or {})
    return PlainTextResponse(render_theme_css(theme), media_type="text/css")
