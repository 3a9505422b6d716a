"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, StrictStr, field_validator


class UserPayload(BaseModel):
    """Body of create and update requests.

    Missing members default to empty strings so that "absent" and "empty" are
    rejected by the same required-field check. An explicit null counts as
    missing.
    """

    model_config = ConfigDict(extra="ignore")

    name: StrictStr = ""
    email: StrictStr = ""

    @field_validator("name", "email", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        """Treat an explicit null the same as a missing member."""
        return "" if value is None else value

    def has_required_fields(self) -> bool:
        """Check that both name and email are non-empty."""
        return bool(self.name) and bool(self.email)


class UserResponse(BaseModel):
    """User response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    created_at: datetime
    active: bool
