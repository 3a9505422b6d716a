"""Pydantic schemas for API requests and responses."""

from user_registry.schemas.user import UserPayload, UserResponse

__all__ = [
    "UserPayload",
    "UserResponse",
]
