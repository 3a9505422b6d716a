"""FastAPI dependencies for request parsing and the registry."""

import re
from typing import Annotated

from fastapi import Depends, Query, Request
from pydantic import ValidationError

from user_registry.config import Settings, get_settings
from user_registry.errors import BadRequestError
from user_registry.schemas.user import UserPayload
from user_registry.services.registry import UserRegistry, get_registry

_USER_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
# Ids are 64-bit signed integers
MIN_USER_ID = -(2**63)
MAX_USER_ID = 2**63 - 1

RegistryDep = Annotated[UserRegistry, Depends(get_registry)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


def parse_user_id(raw: str) -> int:
    """Parse a user id query value, rejecting anything but an optionally signed integer."""
    if not _USER_ID_PATTERN.fullmatch(raw):
        raise BadRequestError("Invalid user ID")
    try:
        user_id = int(raw)
    except ValueError:
        # More digits than the interpreter will convert
        raise BadRequestError("Invalid user ID") from None
    if not MIN_USER_ID <= user_id <= MAX_USER_ID:
        raise BadRequestError("Invalid user ID")
    return user_id


def optional_user_id(user_id: Annotated[str | None, Query(alias="id")] = None) -> int | None:
    """Get the ``id`` query parameter if present. An empty value counts as absent."""
    if not user_id:
        return None
    return parse_user_id(user_id)


def required_user_id(user_id: Annotated[str | None, Query(alias="id")] = None) -> int:
    """Get the ``id`` query parameter, which must be present."""
    if not user_id:
        raise BadRequestError("User ID is required")
    return parse_user_id(user_id)


async def read_user_payload(request: Request) -> UserPayload:
    """Parse the request body as a user payload.

    Called from inside handlers rather than declared as a dependency so the
    body is only read after the id has been validated.
    """
    body = await request.body()
    try:
        return UserPayload.model_validate_json(body)
    except ValidationError:
        raise BadRequestError("Invalid JSON") from None
