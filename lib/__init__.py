# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - validation.py: Name/email checks for the new-user form
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.validation import validate_email, validate_name

__all__ = [
    # Validation
    "validate_email",
    "validate_name",
]
