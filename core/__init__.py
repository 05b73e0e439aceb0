# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains framework-agnostic logic:
# - models/: Pydantic schemas shared by the service and the client
# - services/: The in-memory user store
#
# Code in this package should NOT import from FastAPI or httpx.
# This keeps the logic testable and reusable.
# =============================================================================
