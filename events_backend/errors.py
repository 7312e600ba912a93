"""Service-level exceptions.

Services raise these; the application translates them into HTTP responses
in one place (see ``events_backend.main``).
"""
from fastapi import status


class ServiceError(Exception):
    """Base exception for service errors"""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ServiceError):
    """Requested entity does not exist"""

    status_code = status.HTTP_404_NOT_FOUND


class ForbiddenError(ServiceError):
    """Acting user may not modify the entity"""

    status_code = status.HTTP_403_FORBIDDEN


class ConflictError(ServiceError):
    """A unique field is already taken"""

    status_code = status.HTTP_409_CONFLICT


class AuthenticationError(ServiceError):
    """Credentials or bearer token rejected"""

    status_code = status.HTTP_401_UNAUTHORIZED
