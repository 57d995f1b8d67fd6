"""
Name: Custom Exceptions

Responsibilities:
  - Define typed errors raised by the persistence layer
  - Generate unique error IDs for log correlation

Collaborators:
  - infrastructure.repositories: raise these on stored-function failures
  - application.usecases: catch and convert into tagged results

Notes:
  - error_code is stable; error_id is a UUID per occurrence
  - Classification happens on SQLSTATE, never on message text
"""

from dataclasses import dataclass
from uuid import uuid4


@dataclass
class ErrorResponse:
    """Structured error description for logs."""

    error_code: str
    message: str
    error_id: str

    def to_dict(self) -> dict:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "error_id": self.error_id,
        }


class UserApiError(Exception):
    """Base exception for the user API."""

    error_code: str = "USER_API_ERROR"

    def __init__(
        self,
        message: str,
        error_id: str | None = None,
        original_error: Exception | None = None,
    ):
        self.message = message
        self.error_id = error_id or str(uuid4())
        self.original_error = original_error
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(
            error_code=self.error_code,
            message=self.message,
            error_id=self.error_id,
        )


class DatabaseError(UserApiError):
    """Database connection, query, timeout or pool error."""

    error_code: str = "DATABASE_ERROR"


class DuplicateEmailError(DatabaseError):
    """The unique constraint on users.email rejected the write."""

    error_code: str = "DUPLICATE_EMAIL"


class UserNotFoundError(DatabaseError):
    """The stored function reported that the target user does not exist."""

    error_code: str = "USER_NOT_FOUND"
