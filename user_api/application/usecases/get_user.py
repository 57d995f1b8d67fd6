"""
Name: Get User Use Case

Responsibilities:
  - Validate the id and fetch a single user
"""

from dataclasses import dataclass
from typing import Any

from ...domain.repositories import UserRepository
from ...exceptions import DatabaseError
from ...logger import logger
from .user_results import (
    AuthenticatedUser,
    UserResult,
    invalid_user_id,
    unauthenticated,
    unexpected,
    user_not_found,
)
from .validation import parse_user_id


@dataclass
class GetUserInput:
    user_id: Any = None
    actor: AuthenticatedUser | None = None


class GetUserUseCase:
    """R: Lookup by id."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    def execute(self, input_data: GetUserInput) -> UserResult:
        if input_data.actor is None:
            return UserResult(error=unauthenticated())

        user_id = parse_user_id(input_data.user_id)
        if user_id is None:
            return UserResult(error=invalid_user_id())

        try:
            user = self.repository.get_user_by_id(user_id)
        except DatabaseError as exc:
            logger.error(
                "Failed to retrieve user",
                extra={"error_id": exc.error_id, "error_message": exc.message},
            )
            return UserResult(error=unexpected("Failed to retrieve user", exc.message))

        if user is None:
            return UserResult(error=user_not_found())
        return UserResult(user=user)
