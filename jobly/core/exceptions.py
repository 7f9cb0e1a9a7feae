"""
Typed errors shared by the data-access layer and the API layer.

Each error carries its HTTP status, so FastAPI renders it as
{"detail": message} without any per-route translation.
"""

from fastapi import HTTPException, status


class JoblyError(HTTPException):
    """Base class for application errors."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(status_code=self.status_code, detail=self.message)

    def __str__(self):
        return self.message


class BadRequestError(JoblyError):
    """400: malformed or invalid input."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad Request"


class InvalidInputError(BadRequestError):
    """400: an internal precondition was violated (e.g. empty partial update)."""
    default_message = "No data"


class UnauthorizedError(JoblyError):
    """401: missing or insufficient authorization."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class NotFoundError(JoblyError):
    """404: referenced entity does not exist."""
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not Found"
