# =============================================================================
# core/services/user_store.py - In-Memory User Store
# =============================================================================
# Holds the user directory for the lifetime of the process.
# There is no persistence: a restart leaves only the seeded records.
#
# One store is created per application instance and handed to route
# handlers through app/dependencies.py, so tests get an isolated store
# by building a fresh app.
# =============================================================================

import logging
import time
from typing import Iterable

from core.models.user import User, UserCreate

logger = logging.getLogger(__name__)


# Records present on every startup
SEED_USERS: tuple[User, ...] = (
    User(id=1, name="John Doe", email="john@example.com"),
    User(id=2, name="Jane Smith", email="jane@example.com"),
    User(id=3, name="Bob Johnson", email="bob@example.com"),
)


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class UserStore:
    """
    Ordered, append-only collection of user records.

    Handlers run on the event loop one at a time, so no locking is done.
    """

    def __init__(self, seed: Iterable[User] = SEED_USERS):
        self._users: list[User] = [user.model_copy() for user in seed]
        self._last_id = max((user.id for user in self._users), default=0)

    def __len__(self) -> int:
        return len(self._users)

    def list_users(self) -> list[User]:
        """
        Return every record in insertion order.

        The returned list is a copy; mutating it does not touch the store.
        """
        return list(self._users)

    def next_id(self) -> int:
        """
        Issue a new identifier.

        Uses the current time in milliseconds. Two creations inside the same
        millisecond (or a clock that went backwards) fall back to the last
        issued id plus one, so ids stay strictly increasing.
        """
        candidate = _now_ms()
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return candidate

    def create_user(self, payload: UserCreate) -> User:
        """
        Append a new record built from the payload.

        Args:
            payload: Name and email as sent by the caller (not validated)

        Returns:
            The stored record, including its new id
        """
        user = User(id=self.next_id(), name=payload.name, email=payload.email)
        self._users.append(user)
        logger.info(f"Created user: {user.id} (total: {len(self._users)})")
        return user
