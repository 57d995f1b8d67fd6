"""
Name: In-Memory User Repository

Responsibilities:
  - Store users in memory (tests/local dev)
  - Mirror the stored-function contract of PostgresUserRepository

Collaborators:
  - users.User
  - domain.repositories.UserRepository

Constraints / Notes:
  - Thread-safe access (Lock); uniqueness is checked under the same lock
    as the write, so concurrent creates with one email yield one winner
  - Insertion order (ascending id), aligned with get_all_users
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from threading import Lock
from typing import Dict, List, Optional

from ...exceptions import DuplicateEmailError, UserNotFoundError
from ...users import User


class InMemoryUserRepository:
    """R: Thread-safe in-memory user repository."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._users: Dict[int, User] = {}
        self._next_id = 1

    def _email_taken(self, email: str, exclude_id: int | None = None) -> bool:
        return any(
            user.email == email and user.id != exclude_id
            for user in self._users.values()
        )

    def create_user(
        self, first_name: str, last_name: str, email: str, password_hash: str
    ) -> User:
        with self._lock:
            if self._email_taken(email):
                raise DuplicateEmailError("The email address is already in use")
            now = datetime.now(timezone.utc)
            user = User(
                id=self._next_id,
                first_name=first_name,
                last_name=last_name,
                email=email,
                password_hash=password_hash,
                created_at=now,
                updated_at=now,
            )
            self._users[user.id] = user
            self._next_id += 1
            return replace(user)

    def get_user_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            for user in self._users.values():
                if user.email == email:
                    return replace(user)
        return None

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        with self._lock:
            user = self._users.get(user_id)
            return replace(user) if user else None

    def get_all_users(self, limit: int, offset: int) -> List[User]:
        with self._lock:
            ordered = sorted(self._users.values(), key=lambda u: u.id)
            return [replace(user) for user in ordered[offset : offset + limit]]

    def count_users(self) -> int:
        with self._lock:
            return len(self._users)

    def update_user(
        self,
        user_id: int,
        first_name: str,
        last_name: str,
        email: str,
        password_hash: Optional[str],
    ) -> User:
        with self._lock:
            existing = self._users.get(user_id)
            if existing is None:
                raise UserNotFoundError("User not found")
            if self._email_taken(email, exclude_id=user_id):
                raise DuplicateEmailError("The email address is already in use")
            updated = replace(
                existing,
                first_name=first_name,
                last_name=last_name,
                email=email,
                password_hash=password_hash or existing.password_hash,
                updated_at=datetime.now(timezone.utc),
            )
            self._users[user_id] = updated
            return replace(updated)

    def delete_user(self, user_id: int) -> int:
        with self._lock:
            if self._users.pop(user_id, None) is None:
                raise UserNotFoundError("User not found")
            return 1

    def ping(self) -> bool:
        return True
