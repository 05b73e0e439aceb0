# =============================================================================
# client/state.py - Directory Client State
# =============================================================================
# Holds everything the user-directory form shows and reacts to its events:
# - mount(): load the directory once
# - change()/blur(): track field values, touched flags and per-field errors
# - submit(): validate, POST, append the new user, flash a success indicator
# - delete(): mark a user as deleting, then drop it locally after a delay
#
# Delete never reaches the service. Reloading the directory brings
# "deleted" users back.
#
# All mutations happen on one asyncio loop. The two timers (success
# indicator, delete delay) use loop.call_later and read the latest state
# when they fire.
#
# Usage:
#   async with DirectoryAPI(settings.api_base_url) as api:
#       state = DirectoryClient(api)
#       await state.mount()
#       state.change_name("Alice Example")
#       await state.submit()
# =============================================================================

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum

from client.api import DirectoryAPI, DirectoryAPIError
from core.models.user import User
from lib.validation import validate_email, validate_name

logger = logging.getLogger(__name__)


class FormField(str, Enum):
    """Fields of the new-user form."""
    NAME = "name"
    EMAIL = "email"


@dataclass
class FieldErrors:
    """Current validation message per field (None means no error)."""
    name: str | None = None
    email: str | None = None

    def any(self) -> bool:
        return bool(self.name or self.email)


@dataclass
class TouchedFields:
    """Whether each field has been blurred at least once."""
    name: bool = False
    email: bool = False


class DirectoryClient:
    """
    State and behaviour of the user-directory screen.

    Args:
        api: Connected DirectoryAPI
        success_seconds: How long show_success stays True after an add
        delete_delay: Seconds between marking a user deleting and removing it
    """

    def __init__(
        self,
        api: DirectoryAPI,
        success_seconds: float = 3.0,
        delete_delay: float = 0.3,
    ):
        self.api = api
        self.success_seconds = success_seconds
        self.delete_delay = delete_delay

        self.users: list[User] = []
        self.loading = True
        self.error: str | None = None

        self.name_value = ""
        self.email_value = ""
        self.validation_errors = FieldErrors()
        self.touched = TouchedFields()

        self.is_submitting = False
        self.show_success = False
        self.deleting_id: int | None = None

        self._timers: set[asyncio.TimerHandle] = set()

    # -------------------------------------------------------------------------
    # Derived State
    # -------------------------------------------------------------------------

    @property
    def user_count(self) -> int:
        return len(self.users)

    @property
    def is_form_valid(self) -> bool:
        """Both fields filled in and neither currently flagged."""
        return bool(
            self.name_value
            and self.email_value
            and not self.validation_errors.any()
        )

    def _existing_emails(self) -> list:
        return [user.email for user in self.users]

    def _validate(self, field: FormField) -> str | None:
        if field is FormField.NAME:
            return validate_name(self.name_value)
        return validate_email(self.email_value, self._existing_emails())

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    async def mount(self) -> None:
        """Initial load. Called once when the screen opens."""
        await self.fetch_users()

    async def fetch_users(self) -> None:
        """Replace local users with the service's list."""
        self.loading = True
        try:
            self.users = await self.api.fetch_users()
            self.error = None
        except DirectoryAPIError as e:
            logger.error(f"Loading users failed: {e.message}")
            self.error = e.message
        finally:
            self.loading = False

    # -------------------------------------------------------------------------
    # Form Events
    # -------------------------------------------------------------------------

    def change(self, field: FormField | str, value: str) -> None:
        """
        Keystroke in a field.

        Live validation only kicks in once the field has been touched.
        """
        field = FormField(field)
        setattr(self, f"{field.value}_value", value)
        if getattr(self.touched, field.value):
            setattr(self.validation_errors, field.value, self._validate(field))

    def change_name(self, value: str) -> None:
        self.change(FormField.NAME, value)

    def change_email(self, value: str) -> None:
        self.change(FormField.EMAIL, value)

    def blur(self, field: FormField | str) -> None:
        """Field lost focus: mark it touched and check it."""
        field = FormField(field)
        setattr(self.touched, field.value, True)
        setattr(self.validation_errors, field.value, self._validate(field))

    async def submit(self) -> User | None:
        """
        Submit the form.

        Returns the created user, or None when validation failed (nothing
        is sent) or the request failed (error is set).
        """
        name_error = self._validate(FormField.NAME)
        email_error = self._validate(FormField.EMAIL)

        if name_error or email_error:
            self.validation_errors = FieldErrors(name=name_error, email=email_error)
            self.touched = TouchedFields(name=True, email=True)
            return None

        self.is_submitting = True
        try:
            user = await self.api.create_user(
                name=self.name_value.strip(),
                email=self.email_value.strip(),
            )
        except DirectoryAPIError as e:
            logger.error(f"Adding user failed: {e.message}")
            self.error = e.message
            return None
        finally:
            self.is_submitting = False

        self.users = [*self.users, user]
        self.name_value = ""
        self.email_value = ""
        self.validation_errors = FieldErrors()
        self.touched = TouchedFields()
        self.error = None

        self.show_success = True
        self._schedule(self.success_seconds, self._hide_success)
        return user

    def _hide_success(self) -> None:
        self.show_success = False

    # -------------------------------------------------------------------------
    # Local Delete
    # -------------------------------------------------------------------------

    def delete(self, user_id: int) -> None:
        """
        Remove a user from the local list only.

        deleting_id is set at once; the record disappears after delete_delay.
        Must be called from code running on the event loop.
        """
        self.deleting_id = user_id
        self._schedule(self.delete_delay, self._remove_user, user_id)

    def _remove_user(self, user_id: int) -> None:
        self.users = [user for user in self.users if user.id != user_id]
        self.deleting_id = None
        logger.info(f"Removed user {user_id} locally ({self.user_count} left)")

    # -------------------------------------------------------------------------
    # Timers
    # -------------------------------------------------------------------------

    def _schedule(self, delay: float, callback, *args) -> None:
        loop = asyncio.get_running_loop()
        handle: asyncio.TimerHandle

        def fire() -> None:
            self._timers.discard(handle)
            callback(*args)

        handle = loop.call_later(delay, fire)
        self._timers.add(handle)

    @property
    def has_pending_timers(self) -> bool:
        return bool(self._timers)

    def cancel_timers(self) -> None:
        """Cancel timers that have not fired yet."""
        for handle in self._timers:
            handle.cancel()
        self._timers.clear()
