# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - user.py: User record, creation payload and health payload
#
# These models define the "contract" between API and clients.
# =============================================================================

from .user import (
    HealthStatus,
    User,
    UserCreate,
)

__all__ = [
    "HealthStatus",
    "User",
    "UserCreate",
]
