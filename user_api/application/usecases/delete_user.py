"""
Name: Delete User Use Case

Responsibilities:
  - Validate the id and hard-delete the user
  - Surface a missing row (error or zero count) as NOT_FOUND
"""

from dataclasses import dataclass
from typing import Any

from ...domain.repositories import UserRepository
from ...exceptions import DatabaseError, UserNotFoundError
from ...logger import logger
from .user_results import (
    AuthenticatedUser,
    DeleteUserResult,
    invalid_user_id,
    unauthenticated,
    unexpected,
    user_not_found,
)
from .validation import parse_user_id


@dataclass
class DeleteUserInput:
    user_id: Any = None
    actor: AuthenticatedUser | None = None


class DeleteUserUseCase:
    """R: Delete user."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    def execute(self, input_data: DeleteUserInput) -> DeleteUserResult:
        if input_data.actor is None:
            return DeleteUserResult(error=unauthenticated())

        user_id = parse_user_id(input_data.user_id)
        if user_id is None:
            return DeleteUserResult(error=invalid_user_id())

        try:
            deleted_rows = self.repository.delete_user(user_id)
        except UserNotFoundError:
            return DeleteUserResult(error=user_not_found())
        except DatabaseError as exc:
            logger.error(
                "Failed to delete user",
                extra={"error_id": exc.error_id, "error_message": exc.message},
            )
            return DeleteUserResult(
                error=unexpected("Failed to delete user", exc.message)
            )

        if deleted_rows == 0:
            return DeleteUserResult(error=user_not_found())

        logger.info(
            "User deleted",
            extra={"user_id": user_id, "actor_id": input_data.actor.user.id},
        )
        return DeleteUserResult(deleted_rows=deleted_rows)
