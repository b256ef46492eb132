"""
Error taxonomy shared by the stores, the auth gate and the API layer.

Every error carries the HTTP status it is rendered with; the application's
exception handler turns it into ``{"detail": message}``.
"""
from typing import Optional

from starlette import status


class TaskboardError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(TaskboardError):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_message = "Invalid input"


class DuplicateEmail(TaskboardError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Email already exists"


class InvalidCredentials(TaskboardError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid credentials"


class InvalidId(TaskboardError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid id"


class Unauthenticated(TaskboardError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "No token, authorization denied"


class InvalidToken(TaskboardError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Token is not valid"


class Forbidden(TaskboardError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Not allowed to access this resource"


class NotFound(TaskboardError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class UserNotFound(NotFound):
    default_message = "User not found"


class InternalError(TaskboardError):
    pass
