# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from app.exceptions import StoreUnavailableError
from core.services.user_store import UserStore


def get_user_store(request: Request) -> UserStore:
    """
    Get the user store attached to the running application.

    The store is attached by create_app() in app/main.py. An app assembled
    without it gets a 503 STORE_UNAVAILABLE instead of an AttributeError.
    """
    store = getattr(request.app.state, "user_store", None)
    if store is None:
        raise StoreUnavailableError()
    return store


# Type alias for dependency injection
UserStoreDep = Annotated[UserStore, Depends(get_user_store)]
