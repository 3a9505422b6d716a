"""User model."""

from dataclasses import dataclass, replace
from datetime import datetime


@dataclass(frozen=True)
class User:
    """A registered user.

    Instances are immutable; changes produce a new record via ``with_changes``.
    """

    id: int
    name: str
    email: str
    created_at: datetime
    active: bool = True

    def with_changes(self, **changes) -> "User":
        """Return a copy of this record with the given fields replaced."""
        return replace(self, **changes)
