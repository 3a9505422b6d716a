"""User API endpoints.

All operations share the ``/users`` path and are selected by HTTP method;
the record id travels in the ``id`` query parameter.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import PlainTextResponse

from user_registry.api.dependencies import (
    RegistryDep,
    SettingsDep,
    optional_user_id,
    read_user_payload,
    required_user_id,
)
from user_registry.errors import BadRequestError
from user_registry.schemas.user import UserResponse

router = APIRouter(prefix="/users", tags=["users"])

REQUIRED_FIELDS_MESSAGE = "Name and email are required"


@router.get("", response_model=UserResponse | list[UserResponse])
async def get_users(
    registry: RegistryDep,
    user_id: Annotated[int | None, Depends(optional_user_id)],
):
    """Get a single user when ``id`` is given, otherwise all users."""
    if user_id is not None:
        return UserResponse.model_validate(registry.get(user_id))

    return [UserResponse.model_validate(user) for user in registry.list_all()]


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(request: Request, registry: RegistryDep):
    """Create a new user."""
    payload = await read_user_payload(request)
    if not payload.has_required_fields():
        raise BadRequestError(REQUIRED_FIELDS_MESSAGE)

    user = registry.create(payload.name, payload.email)
    return UserResponse.model_validate(user)


@router.put("", response_class=PlainTextResponse)
async def update_user(
    request: Request,
    registry: RegistryDep,
    settings: SettingsDep,
    user_id: Annotated[int, Depends(required_user_id)],
):
    """Update a user's name and email."""
    payload = await read_user_payload(request)
    # Empty values pass unless explicitly configured otherwise
    if settings.require_fields_on_update and not payload.has_required_fields():
        raise BadRequestError(REQUIRED_FIELDS_MESSAGE)

    registry.update(user_id, payload.name, payload.email)
    return "User updated successfully"


@router.delete("", response_class=PlainTextResponse)
async def deactivate_user(
    registry: RegistryDep,
    user_id: Annotated[int, Depends(required_user_id)],
):
    """Deactivate a user. Records are never removed."""
    registry.deactivate(user_id)
    return "User deactivated successfully"
