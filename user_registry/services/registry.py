"""In-memory user registry."""

import logging
import threading
from datetime import UTC, datetime
from functools import lru_cache

from user_registry.errors import NotFoundError
from user_registry.models.user import User

logger = logging.getLogger(__name__)


class UserRegistry:
    """Owns every user record and the id counter.

    Records live in an insertion-ordered dict keyed by id. A single lock guards
    the dict and the counter, so handlers running on worker threads never see a
    half-applied mutation. Stored records are frozen dataclasses, so the
    objects returned to callers cannot be used to modify registry state.
    """

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def create(self, name: str, email: str) -> User:
        """Create an active user with the next id."""
        with self._lock:
            user = User(
                id=self._next_id,
                name=name,
                email=email,
                created_at=datetime.now(UTC),
                active=True,
            )
            self._users[user.id] = user
            self._next_id += 1

        logger.info(f"Created user {user.id}")
        return user

    def get(self, user_id: int) -> User:
        """Get a user by id."""
        with self._lock:
            user = self._users.get(user_id)
        if user is None:
            raise NotFoundError(user_id)
        return user

    def list_all(self) -> list[User]:
        """Get all users in creation order."""
        with self._lock:
            return list(self._users.values())

    def update(self, user_id: int, name: str, email: str) -> None:
        """Overwrite a user's name and email.

        Empty values are stored as given; callers decide whether to reject them.
        """
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                raise NotFoundError(user_id)
            self._users[user_id] = user.with_changes(name=name, email=email)

        logger.info(f"Updated user {user_id}")

    def deactivate(self, user_id: int) -> None:
        """Mark a user inactive. Deactivating an inactive user is a no-op."""
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                raise NotFoundError(user_id)
            if user.active:
                self._users[user_id] = user.with_changes(active=False)

        logger.info(f"Deactivated user {user_id}")


@lru_cache
def get_registry() -> UserRegistry:
    """Get the process-wide registry instance."""
    return UserRegistry()
