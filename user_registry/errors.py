"""Error types raised by the registry and the request layer."""

from fastapi import status


class RegistryError(Exception):
    """Base error carrying the HTTP status it maps to."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(RegistryError):
    """Raised when an operation references a user id that was never issued."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, user_id: int):
        super().__init__(f"user with ID {user_id} not found")
        self.user_id = user_id


class BadRequestError(RegistryError):
    """Malformed or missing request input."""

    status_code = status.HTTP_400_BAD_REQUEST


class MethodNotAllowedError(RegistryError):
    """HTTP method not supported on the resource."""

    status_code = status.HTTP_405_METHOD_NOT_ALLOWED

    def __init__(self, message: str = "Method not allowed"):
        super().__init__(message)


class InferenceError(Exception):
    """Raised when the inference service cannot produce a summary."""
