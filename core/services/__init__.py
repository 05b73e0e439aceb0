# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .user_store import SEED_USERS, UserStore

__all__ = [
    "SEED_USERS",
    "UserStore",
]
