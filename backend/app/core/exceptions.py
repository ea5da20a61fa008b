"""Service-layer errors mapped to HTTP responses in main.py."""

from fastapi import status


class ServiceError(Exception):
    """Base exception for service layer errors."""

    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NotFoundError(ServiceError):
    def __init__(self, message: str = "Not found") -> None:
        super().__init__(message, status.HTTP_404_NOT_FOUND)


class AccessDeniedError(NotFoundError):
    """The record exists but is outside the viewer's scope.

    Responds exactly like NotFoundError so the API does not reveal that the
    record exists; the type is kept separate for logs and tests.
    """

    def __init__(self, message: str, *, user_id=None, record_id=None) -> None:
        super().__init__(message)
        self.user_id = user_id
        self.record_id = record_id


class InvalidTransitionError(ServiceError):
    def __init__(self, field: str, current: str, requested: str) -> None:
        super().__init__(
            f"Invalid {field} '{requested}' (current value '{current}')",
            status.HTTP_400_BAD_REQUEST,
        )
        self.field = field
        self.current = current
        self.requested = requested


class ConflictError(ServiceError):
    def __init__(self, message: str) -> None:
        super().__init__(message, status.HTTP_400_BAD_REQUEST)


class AuthenticationError(ServiceError):
    def __init__(self, message: str = "Invalid email or password") -> None:
        super().__init__(message, status.HTTP_401_UNAUTHORIZED)
