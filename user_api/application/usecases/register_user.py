"""
Name: Register User Use Case

Responsibilities:
  - Validate the registration payload
  - Hash the password and create the user through the stored operation
  - Issue a bearer token for the new user

Collaborators:
  - domain.repositories.UserRepository
  - auth_users: hash_password, create_access_token

Notes:
  - The email pre-check is advisory; the unique constraint behind
    create_user decides concurrent registrations
"""

from dataclasses import dataclass
from typing import Any

from ...auth_users import create_access_token, hash_password
from ...domain.repositories import UserRepository
from ...exceptions import DatabaseError, DuplicateEmailError
from ...logger import logger
from .user_results import (
    AuthResult,
    duplicate_email,
    unexpected,
    validation_failed,
)
from .validation import validate_user_fields


@dataclass
class RegisterUserInput:
    first_name: Any = None
    last_name: Any = None
    email: Any = None
    password: Any = None


class RegisterUserUseCase:
    """R: Register a user and issue a token."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    def execute(self, input_data: RegisterUserInput) -> AuthResult:
        fields, errors = validate_user_fields(
            input_data.first_name,
            input_data.last_name,
            input_data.email,
            input_data.password,
            password_required=True,
        )
        if fields is None:
            return AuthResult(error=validation_failed(errors.errors))

        try:
            if self.repository.get_user_by_email(fields.email) is not None:
                return AuthResult(error=duplicate_email())

            user = self.repository.create_user(
                fields.first_name,
                fields.last_name,
                fields.email,
                hash_password(fields.password),
            )
        except DuplicateEmailError:
            logger.info("Registration rejected: duplicate email")
            return AuthResult(error=duplicate_email())
        except DatabaseError as exc:
            logger.error(
                "Registration failed",
                extra={"error_id": exc.error_id, "error_message": exc.message},
            )
            return AuthResult(error=unexpected("Registration failed", exc.message))

        token = create_access_token(user.id)
        logger.info("Registered user", extra={"user_id": user.id})
        return AuthResult(user=user, token=token)
