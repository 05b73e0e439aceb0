# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the User Directory:
# - test_models.py: Pydantic model behaviour
# - test_user_store.py: In-memory store and id assignment
# - test_api.py: HTTP endpoints via FastAPI's TestClient
# - test_validation.py: Name/email form rules
# - test_client_api.py: httpx wrapper against the app and mocked failures
# - test_client_state.py: Client screen state, timers and local delete
# - test_config.py: Settings loading
#
# Run tests with: pytest
# =============================================================================
