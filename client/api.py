# =============================================================================
# client/api.py - User Directory HTTP Wrapper
# =============================================================================
# Thin async wrapper around the service's REST endpoints, built on httpx.
#
# Every failure - transport error or non-2xx status - is raised as a
# DirectoryAPIError whose message is ready to show to the user.
#
# Usage:
#   async with DirectoryAPI("http://localhost:5000") as api:
#       users = await api.fetch_users()
# =============================================================================

import logging
from typing import Any

import httpx
from pydantic import TypeAdapter

from core.models.user import HealthStatus, User

logger = logging.getLogger(__name__)

GENERIC_ERROR = "An error occurred"

_user_list = TypeAdapter(list[User])
_user = TypeAdapter(User)
_health = TypeAdapter(HealthStatus)

CLIENT_ERROR_SUGGESTION = "Check that the API server is running and API_URL points at it"


class DirectoryAPIError(Exception):
    """
    Raised when a request to the User Directory Service fails.

    `message` is what the screen shows (e.g. "Failed to fetch users", or the
    transport error text). `status_code` is None when no response came back.
    """

    code = "DIRECTORY_API_ERROR"

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.suggestion = CLIENT_ERROR_SUGGESTION
        self.details: dict[str, Any] = (
            {"status_code": status_code} if status_code is not None else {}
        )

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}\n  Suggestion: {self.suggestion}"


class DirectoryAPI:
    """
    Async client for the User Directory Service.

    Args:
        base_url: Service root, e.g. "http://localhost:5000"
        timeout: Seconds to wait for each request
        transport: Optional httpx transport (tests pass ASGITransport or
            MockTransport here)
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "DirectoryAPI":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        failure_message: str,
        json: Any = None,
    ) -> httpx.Response:
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e!r}")
            raise DirectoryAPIError(str(e) or GENERIC_ERROR) from e

        if not response.is_success:
            logger.warning(f"{method} {path} returned {response.status_code}")
            raise DirectoryAPIError(failure_message, status_code=response.status_code)

        return response

    @staticmethod
    def _decode(response: httpx.Response, adapter: TypeAdapter) -> Any:
        # Bad JSON and schema mismatches both surface as ValueError
        try:
            return adapter.validate_python(response.json())
        except ValueError as e:
            logger.error(f"Unreadable response from {response.request.url}: {e}")
            raise DirectoryAPIError(str(e) or GENERIC_ERROR, status_code=response.status_code) from e

    async def fetch_users(self) -> list[User]:
        """GET /api/users - the full directory in service order."""
        response = await self._request("GET", "/api/users", "Failed to fetch users")
        return self._decode(response, _user_list)

    async def create_user(self, name: str, email: str) -> User:
        """
        POST /api/users.

        Values are sent exactly as given; trimming is the caller's job.
        """
        response = await self._request(
            "POST",
            "/api/users",
            "Failed to add user",
            json={"name": name, "email": email},
        )
        return self._decode(response, _user)

    async def health(self) -> HealthStatus:
        """GET /api/health."""
        response = await self._request("GET", "/api/health", "Service is unavailable")
        return self._decode(response, _health)
