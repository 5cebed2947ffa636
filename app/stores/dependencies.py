from fastapi import Query

from app.core.constants import ADMIN_ROLE_PARAM, ADMIN_ROLE_VALUE
from app.core.exceptions import ForbiddenError


async def require_admin_mode(
    role: str | None = Query(None, alias=ADMIN_ROLE_PARAM, description="Admin mode flag"),
) -> None:
    """Require the storefront admin flag. This is a mode switch, not authentication."""
    if role != ADMIN_ROLE_VALUE:
        raise ForbiddenError("Modo administrador necessário")
