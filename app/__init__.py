# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the User Directory Service:
# - main.py: App factory, middleware setup, error handlers
# - config.py: Environment variable loading and settings
# - dependencies.py: Shared dependencies (the user store)
# - routers/: API endpoint definitions organized by feature
#
# The app layer is thin - it handles HTTP concerns and delegates
# record keeping to the core/ package.
# =============================================================================
