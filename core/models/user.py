# =============================================================================
# core/models/user.py - User Record Schemas
# =============================================================================
# These models define the API contract for the user directory:
# - User: One stored record (id, name, email)
# - UserCreate: Body of POST /api/users
# - HealthStatus: Liveness payload of GET /api/health
#
# The service performs no validation of incoming records. Name and email
# rules are enforced by the client (see lib/validation.py), so every field
# except the id is optional and holds whatever JSON value was sent.
# =============================================================================

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """
    A single user record.

    Example:
        {
            "id": 1,
            "name": "John Doe",
            "email": "john@example.com"
        }
    """

    # Millisecond timestamp for created records, 1-3 for the seeds
    id: int = Field(
        ...,
        description="Unique user identifier"
    )

    # Null when the creating request omitted the field
    name: Any = Field(
        default=None,
        description="Display name"
    )

    email: Any = Field(
        default=None,
        description="Email address"
    )


class UserCreate(BaseModel):
    """
    Payload for creating a user.

    Both fields are optional: a missing field is stored as null.
    Values are not type-checked, and unknown keys are dropped.

    Example:
        {
            "name": "Alice Example",
            "email": "alice@example.com"
        }
    """

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {"name": "Alice Example", "email": "alice@example.com"}
        },
    )

    name: Any = Field(
        default=None,
        description="Display name"
    )

    email: Any = Field(
        default=None,
        description="Email address"
    )

    @classmethod
    def from_body(cls, body: Any) -> "UserCreate":
        """
        Build a payload from a decoded JSON body of any shape.

        Only a JSON object contributes fields; arrays, strings, numbers and
        null give an empty payload.
        """
        if isinstance(body, dict):
            return cls.model_validate(body)
        return cls()


class HealthStatus(BaseModel):
    """Liveness payload."""
    status: str = Field(..., examples=["ok"])
    message: str = Field(..., examples=["Server is running"])
