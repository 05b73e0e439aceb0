# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Liveness endpoint
# - users.py: User list and creation endpoints
#
# Each router is mounted in main.py under the /api prefix.
# =============================================================================

from . import health
from . import users

__all__ = [
    "health",
    "users",
]
