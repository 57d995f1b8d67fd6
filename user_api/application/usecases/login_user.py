"""
Name: Login User Use Case

Responsibilities:
  - Validate credentials payload
  - Verify the password against the stored argon2 hash
  - Issue a bearer token on success

Collaborators:
  - domain.repositories.UserRepository
  - auth_users: verify_password, burn_password_check, create_access_token

Constraints:
  - Unknown email and wrong password produce the same error
"""

from dataclasses import dataclass
from typing import Any

from ...auth_users import burn_password_check, create_access_token, verify_password
from ...domain.repositories import UserRepository
from ...exceptions import DatabaseError
from ...logger import logger
from .user_results import (
    AuthResult,
    UserError,
    UserErrorCode,
    unexpected,
    validation_failed,
)
from .validation import FieldErrors, check_password, require_email


@dataclass
class LoginUserInput:
    email: Any = None
    password: Any = None


def _invalid_credentials() -> UserError:
    return UserError(
        code=UserErrorCode.INVALID_CREDENTIALS, message="Invalid credentials"
    )


class LoginUserUseCase:
    """R: Authenticate with email + password."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    def execute(self, input_data: LoginUserInput) -> AuthResult:
        errors = FieldErrors()
        email = require_email(errors, input_data.email, max_length=None)
        password = check_password(
            errors, input_data.password, required=True, min_length=None
        )
        if errors:
            return AuthResult(error=validation_failed(errors.errors))

        try:
            user = self.repository.get_user_by_email(email)
        except DatabaseError as exc:
            logger.error(
                "Login failed",
                extra={"error_id": exc.error_id, "error_message": exc.message},
            )
            return AuthResult(error=unexpected("Login failed", exc.message))

        if user is None:
            burn_password_check(password)
            logger.info("Login failed: invalid credentials")
            return AuthResult(error=_invalid_credentials())

        if not verify_password(password, user.password_hash):
            logger.info("Login failed: invalid credentials")
            return AuthResult(error=_invalid_credentials())

        token = create_access_token(user.id)
        logger.info("Login succeeded", extra={"user_id": user.id})
        return AuthResult(user=user, token=token)
