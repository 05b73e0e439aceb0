# =============================================================================
# app/routers/users.py - User Directory Endpoints
# =============================================================================
# List and create users. There is no update or delete endpoint, and no
# validation: whatever name/email the caller sends is stored.
# =============================================================================

import logging
from typing import Any

from fastapi import APIRouter, Body, status

from app.dependencies import UserStoreDep
from core.models.user import User, UserCreate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/users", response_model=list[User])
async def list_users(store: UserStoreDep):
    """
    List all users.

    Returns the full directory in insertion order. No pagination or filtering.
    """
    return store.list_users()


@router.post("/users", response_model=User, status_code=status.HTTP_201_CREATED)
async def create_user(
    store: UserStoreDep,
    body: Any = Body(
        None,
        examples=[{"name": "Alice Example", "email": "alice@example.com"}],
    ),
):
    """
    Create a user.

    Assigns a fresh id and appends the record to the directory.
    Any JSON body is accepted: name and email are taken from an object as
    sent, and any other shape (or no body) gives a record with null fields.
    Only a body that is not valid JSON is rejected.
    """
    if not isinstance(body, (dict, type(None))):
        logger.debug(f"Non-object body ({type(body).__name__}) stored as an empty record")
    return store.create_user(UserCreate.from_body(body))
