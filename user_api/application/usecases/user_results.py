"""
Name: User Use Case Results

Responsibilities:
  - Provide consistent error/result types for auth + directory use cases
  - Carry the resolved caller identity between the auth gate and
    protected operations
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List

from ...auth_users import IssuedToken, TokenClaims
from ...pagination import PaginationMeta
from ...users import User


class UserErrorCode(str, Enum):
    """R: Error codes for user use cases."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    UNAUTHENTICATED = "UNAUTHENTICATED"
    NOT_FOUND = "NOT_FOUND"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    UNEXPECTED = "UNEXPECTED"


@dataclass
class UserError:
    code: UserErrorCode
    message: str
    errors: Dict[str, List[str]] | None = None
    detail: str | None = None


@dataclass(frozen=True)
class AuthenticatedUser:
    """R: Caller identity produced by AuthenticateTokenUseCase."""

    user: User
    claims: TokenClaims


@dataclass
class AuthResult:
    user: User | None = None
    token: IssuedToken | None = None
    error: UserError | None = None


@dataclass
class AuthenticateResult:
    principal: AuthenticatedUser | None = None
    error: UserError | None = None


@dataclass
class LogoutResult:
    logged_out: bool = False
    error: UserError | None = None


@dataclass
class RefreshResult:
    token: IssuedToken | None = None
    error: UserError | None = None


@dataclass
class ListUsersResult:
    users: List[User]
    pagination: PaginationMeta | None = None
    error: UserError | None = None


@dataclass
class UserResult:
    user: User | None = None
    error: UserError | None = None


@dataclass
class DeleteUserResult:
    deleted_rows: int = 0
    error: UserError | None = None


def validation_failed(errors: Dict[str, List[str]]) -> UserError:
    return UserError(
        code=UserErrorCode.VALIDATION_ERROR,
        message="Validation failed",
        errors=errors,
    )


def invalid_user_id() -> UserError:
    return UserError(code=UserErrorCode.VALIDATION_ERROR, message="Invalid user ID")


def unauthenticated(message: str = "Unauthenticated") -> UserError:
    return UserError(code=UserErrorCode.UNAUTHENTICATED, message=message)


def user_not_found() -> UserError:
    return UserError(code=UserErrorCode.NOT_FOUND, message="User not found")


def duplicate_email() -> UserError:
    return UserError(
        code=UserErrorCode.DUPLICATE_EMAIL,
        message="Email already exists",
        detail="The email address is already in use",
    )


def unexpected(message: str, detail: str) -> UserError:
    return UserError(code=UserErrorCode.UNEXPECTED, message=message, detail=detail)
