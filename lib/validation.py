# =============================================================================
# lib/validation.py - New-User Form Validation
# =============================================================================
# Field checks run by the Directory Client before it submits a new user.
# The service accepts anything, so these rules are the only ones enforced.
#
# Each validator returns an error message, or None when the value is fine.
# Checks run in order and the first failure wins.
#
# Usage:
#   from lib.validation import validate_name, validate_email
#   error = validate_email("alice@example.com", ["john@example.com"])
# =============================================================================

import re
from typing import Any, Iterable

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50

# Matched against the whole raw value (not the trimmed one)
PATTERNS = {
    "name": re.compile(r"[a-zA-Z\s'-]+"),
    "email": re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+"),
}

# Messages shown next to the offending field
NAME_REQUIRED = "Name is required"
NAME_TOO_SHORT = f"Name must be at least {NAME_MIN_LENGTH} characters"
NAME_TOO_LONG = f"Name must be less than {NAME_MAX_LENGTH} characters"
NAME_INVALID_CHARS = "Name can only contain letters, spaces, hyphens, and apostrophes"
EMAIL_REQUIRED = "Email is required"
EMAIL_INVALID = "Please enter a valid email address"
EMAIL_DUPLICATE = "This email is already registered"


def validate_name(name: str) -> str | None:
    """
    Check a display name.

    Length limits apply to the trimmed value; the character check applies
    to the raw value, which may contain any whitespace.

    Example:
        validate_name("A")      -> "Name must be at least 2 characters"
        validate_name("Alice")  -> None
    """
    trimmed = name.strip()
    if not trimmed:
        return NAME_REQUIRED
    if len(trimmed) < NAME_MIN_LENGTH:
        return NAME_TOO_SHORT
    if len(trimmed) > NAME_MAX_LENGTH:
        return NAME_TOO_LONG
    if not PATTERNS["name"].fullmatch(name):
        return NAME_INVALID_CHARS
    return None


def validate_email(email: str, existing_emails: Iterable[Any] = ()) -> str | None:
    """
    Check an email address.

    Args:
        email: Raw field value
        existing_emails: Emails already in the loaded directory. Compared
            case-insensitively. Entries that are not strings (records created
            without an email, or with some other JSON value) are skipped.

    Example:
        validate_email("not-an-email")                           -> "Please enter a valid email address"
        validate_email("Alice@Example.com", ["alice@example.com"]) -> "This email is already registered"
    """
    if not email.strip():
        return EMAIL_REQUIRED
    if not PATTERNS["email"].fullmatch(email):
        return EMAIL_INVALID
    lowered = email.lower()
    if any(isinstance(existing, str) and existing.lower() == lowered for existing in existing_emails):
        return EMAIL_DUPLICATE
    return None
