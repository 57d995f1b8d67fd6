"""
Name: Update User Use Case

Responsibilities:
  - Validate id and payload (password optional)
  - Report a missing user before any duplicate-email conflict
  - Re-hash a supplied password; otherwise keep the stored hash
  - Translate not-found / duplicate-email from the stored operation

Collaborators:
  - domain.repositories.UserRepository
  - auth_users.hash_password

Notes:
  - password_hash=None is the "leave unchanged" signal to update_user
"""

from dataclasses import dataclass
from typing import Any

from ...auth_users import hash_password
from ...domain.repositories import UserRepository
from ...exceptions import DatabaseError, DuplicateEmailError, UserNotFoundError
from ...logger import logger
from .user_results import (
    AuthenticatedUser,
    UserResult,
    duplicate_email,
    invalid_user_id,
    unauthenticated,
    unexpected,
    user_not_found,
    validation_failed,
)
from .validation import parse_user_id, validate_user_fields


@dataclass
class UpdateUserInput:
    user_id: Any = None
    first_name: Any = None
    last_name: Any = None
    email: Any = None
    password: Any = None
    actor: AuthenticatedUser | None = None


class UpdateUserUseCase:
    """R: Update user attributes."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    def execute(self, input_data: UpdateUserInput) -> UserResult:
        if input_data.actor is None:
            return UserResult(error=unauthenticated())

        user_id = parse_user_id(input_data.user_id)
        if user_id is None:
            return UserResult(error=invalid_user_id())

        fields, errors = validate_user_fields(
            input_data.first_name,
            input_data.last_name,
            input_data.email,
            input_data.password,
            password_required=False,
        )
        if fields is None:
            return UserResult(error=validation_failed(errors.errors))

        try:
            if self.repository.get_user_by_id(user_id) is None:
                return UserResult(error=user_not_found())

            owner = self.repository.get_user_by_email(fields.email)
            if owner is not None and owner.id != user_id:
                return UserResult(error=duplicate_email())

            password_hash = hash_password(fields.password) if fields.password else None
            user = self.repository.update_user(
                user_id,
                fields.first_name,
                fields.last_name,
                fields.email,
                password_hash,
            )
        except UserNotFoundError:
            return UserResult(error=user_not_found())
        except DuplicateEmailError:
            return UserResult(error=duplicate_email())
        except DatabaseError as exc:
            logger.error(
                "Failed to update user",
                extra={"error_id": exc.error_id, "error_message": exc.message},
            )
            return UserResult(error=unexpected("Failed to update user", exc.message))

        logger.info(
            "User updated",
            extra={
                "user_id": user.id,
                "actor_id": input_data.actor.user.id,
                "password_changed": password_hash is not None,
            },
        )
        return UserResult(user=user)
