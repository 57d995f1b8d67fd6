"""
Name: List Users Use Case

Responsibilities:
  - Validate page/limit values
  - Fetch the total count, then one page of users

Collaborators:
  - domain.repositories.UserRepository
  - pagination: offset and total_pages arithmetic
"""

from dataclasses import dataclass
from typing import Any

from ...domain.repositories import UserRepository
from ...exceptions import DatabaseError
from ...logger import logger
from ...pagination import (
    DEFAULT_PER_PAGE,
    MAX_PER_PAGE,
    build_pagination,
    page_offset,
)
from .user_results import (
    AuthenticatedUser,
    ListUsersResult,
    unauthenticated,
    unexpected,
    validation_failed,
)
from .validation import FieldErrors, parse_bounded_int


@dataclass
class ListUsersInput:
    page: Any = None
    per_page: Any = None
    actor: AuthenticatedUser | None = None


class ListUsersUseCase:
    """R: Paginated user listing (insertion order)."""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    def execute(self, input_data: ListUsersInput) -> ListUsersResult:
        if input_data.actor is None:
            return ListUsersResult(users=[], error=unauthenticated())

        # R: per_page is exposed as "limit" on the wire
        errors = FieldErrors()
        per_page = parse_bounded_int(
            errors,
            "limit",
            input_data.per_page,
            default=DEFAULT_PER_PAGE,
            minimum=1,
            maximum=MAX_PER_PAGE,
        )
        page = parse_bounded_int(
            errors, "page", input_data.page, default=1, minimum=1
        )
        if errors:
            return ListUsersResult(users=[], error=validation_failed(errors.errors))

        offset = page_offset(page, per_page)
        try:
            total = self.repository.count_users()
            # R: a page past the end never reaches the store (offset may exceed BIGINT)
            users = (
                self.repository.get_all_users(per_page, offset) if offset < total else []
            )
        except DatabaseError as exc:
            logger.error(
                "Failed to retrieve users",
                extra={"error_id": exc.error_id, "error_message": exc.message},
            )
            return ListUsersResult(
                users=[], error=unexpected("Failed to retrieve users", exc.message)
            )

        return ListUsersResult(
            users=users, pagination=build_pagination(page, per_page, total)
        )
