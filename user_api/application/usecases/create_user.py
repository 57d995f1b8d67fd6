"""
Name: Create User Use Case

Responsibilities:
  - Administrative user creation (same contract as registration, no token)

Collaborators:
  - domain.repositories.UserRepository
  - auth_users.hash_password
"""

from dataclasses import dataclass
from typing import Any

from ...auth_users import hash_password
from ...domain.repositories import UserRepository
from ...exceptions import DatabaseError, DuplicateEmailError
from ...logger import logger
from .user_results import (
    AuthenticatedUser,
    UserResult,
    duplicate_email,
    unauthenticated,
    unexpected,
    validation_failed,
)
from .validation import validate_user_fields


@dataclass
class CreateUserInput:
    first_name: Any = None
    last_name: Any = None
    email: Any = None
    password: Any = None
    actor: AuthenticatedUser | None = None


class CreateUserUseCase:
    """R: Create user."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    def execute(self, input_data: CreateUserInput) -> UserResult:
        if input_data.actor is None:
            return UserResult(error=unauthenticated())

        fields, errors = validate_user_fields(
            input_data.first_name,
            input_data.last_name,
            input_data.email,
            input_data.password,
            password_required=True,
        )
        if fields is None:
            return UserResult(error=validation_failed(errors.errors))

        try:
            if self.repository.get_user_by_email(fields.email) is not None:
                return UserResult(error=duplicate_email())

            user = self.repository.create_user(
                fields.first_name,
                fields.last_name,
                fields.email,
                hash_password(fields.password),
            )
        except DuplicateEmailError:
            return UserResult(error=duplicate_email())
        except DatabaseError as exc:
            logger.error(
                "Failed to create user",
                extra={"error_id": exc.error_id, "error_message": exc.message},
            )
            return UserResult(error=unexpected("Failed to create user", exc.message))

        logger.info(
            "User created",
            extra={"user_id": user.id, "actor_id": input_data.actor.user.id},
        )
        return UserResult(user=user)
