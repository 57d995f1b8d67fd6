"""
Name: Domain Repository Interfaces

Responsibilities:
  - Define the persistence boundary consumed by the use cases
  - Define the token revocation store contract

Collaborators:
  - users.User
  - Implementations in infrastructure.repositories and
    infrastructure.token_denylist

Constraints:
  - Pure interfaces (Protocol), no implementation
  - Each call is one atomic unit of work; no partial visibility

Notes:
  - Implementations raise exceptions.DuplicateEmailError,
    exceptions.UserNotFoundError or exceptions.DatabaseError
"""

from typing import List, Optional, Protocol

from ..users import User


class UserRepository(Protocol):
    """
    R: Interface for user persistence (stored operations).

    Uniqueness of email and existence of rows are enforced here,
    authoritatively, not by the callers.
    """

    def create_user(
        self, first_name: str, last_name: str, email: str, password_hash: str
    ) -> User:
        """
        R: Create a user and return the stored row.

        Raises:
            DuplicateEmailError: email already in use
        """
        ...

    def get_user_by_email(self, email: str) -> Optional[User]:
        """R: Fetch user by email (None when absent)."""
        ...

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        """R: Fetch user by id (None when absent)."""
        ...

    def get_all_users(self, limit: int, offset: int) -> List[User]:
        """R: One page of users in stable (insertion) order."""
        ...

    def count_users(self) -> int:
        """R: Total number of users."""
        ...

    def update_user(
        self,
        user_id: int,
        first_name: str,
        last_name: str,
        email: str,
        password_hash: Optional[str],
    ) -> User:
        """
        R: Update a user; password_hash None keeps the stored hash.

        Raises:
            UserNotFoundError: no user with that id
            DuplicateEmailError: email used by another user
        """
        ...

    def delete_user(self, user_id: int) -> int:
        """
        R: Hard-delete a user and return the number of rows removed.

        Raises:
            UserNotFoundError: no user with that id
        """
        ...

    def ping(self) -> bool:
        """R: True when the store is reachable."""
        ...


class TokenDenylist(Protocol):
    """R: Server-side revocation store keyed by token id (jti)."""

    def revoke(self, jti: str, expires_at: int) -> bool:
        """
        R: Mark a token id as revoked until its expiry (epoch seconds).

        Check-and-set is atomic: returns False when the id was already
        revoked, so at most one caller wins for a given token.

        Entries may be dropped after expires_at; the token is expired anyway.
        """
        ...

    def is_revoked(self, jti: str) -> bool:
        """R: True if the token id was revoked."""
        ...
