# =============================================================================
# client/ - Directory Client Package
# =============================================================================
# Python counterpart of the browser form:
# - config.py: API base URL and UI timings
# - api.py: Async httpx wrapper for the service endpoints
# - state.py: Screen state (users, form fields, errors, timers)
#
# scripts/directory_console.py puts a terminal front end on top of these.
# =============================================================================

from client.api import DirectoryAPI, DirectoryAPIError
from client.config import ClientSettings, get_client_settings
from client.state import DirectoryClient, FieldErrors, FormField, TouchedFields

__all__ = [
    "ClientSettings",
    "DirectoryAPI",
    "DirectoryAPIError",
    "DirectoryClient",
    "FieldErrors",
    "FormField",
    "TouchedFields",
    "get_client_settings",
]
