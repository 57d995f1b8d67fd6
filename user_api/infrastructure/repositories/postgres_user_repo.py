"""
Name: PostgreSQL User Repository

Responsibilities:
  - Implement UserRepository on top of the users stored functions
  - Map result rows into User records
  - Classify database failures by SQLSTATE

Collaborators:
  - psycopg / psycopg_pool
  - alembic/versions/001_users_and_functions.py (function definitions)

Constraints:
  - One pooled connection (one transaction) per call
  - Positional parameters only; no SQL composed from user input
  - No retries: create/update/delete are not safe to replay
"""

from typing import List, Optional

import psycopg
from psycopg_pool import ConnectionPool

from ...exceptions import DatabaseError, DuplicateEmailError, UserNotFoundError
from ...logger import logger
from ...users import User

# R: SQLSTATE codes raised by the stored functions
UNIQUE_VIOLATION = "23505"
NO_DATA_FOUND = "P0002"

# R: users.id is BIGINT; larger ids cannot exist
BIGINT_MAX = 2**63 - 1

_USER_COLUMNS = "id, first_name, last_name, email, password_hash, created_at, updated_at"


class PostgresUserRepository:
    """R: PostgreSQL implementation of UserRepository (stored functions)."""

    def __init__(self, pool: Optional[ConnectionPool] = None):
        self._pool = pool

    def _get_pool(self) -> ConnectionPool:
        if self._pool is not None:
            return self._pool

        from ..db.pool import get_pool

        return get_pool()

    def _row_to_user(self, row: tuple) -> User:
        (
            user_id,
            first_name,
            last_name,
            email,
            password_hash,
            created_at,
            updated_at,
        ) = row

        return User(
            id=user_id,
            first_name=first_name,
            last_name=last_name,
            email=email,
            password_hash=password_hash,
            created_at=created_at,
            updated_at=updated_at,
        )

    def _classify(self, exc: Exception, operation: str) -> DatabaseError:
        """R: Map a driver error onto the typed persistence errors."""
        sqlstate = getattr(exc, "sqlstate", None)
        if sqlstate == UNIQUE_VIOLATION:
            return DuplicateEmailError(
                "The email address is already in use", original_error=exc
            )
        if sqlstate == NO_DATA_FOUND:
            return UserNotFoundError("User not found", original_error=exc)
        return DatabaseError(f"{operation} failed: {exc}", original_error=exc)

    def _fetch_one(self, query: str, params: tuple, operation: str):
        try:
            pool = self._get_pool()
            with pool.connection() as conn:
                return conn.execute(query, params).fetchone()
        except psycopg.Error as exc:
            error = self._classify(exc, operation)
            logger.warning(
                f"PostgresUserRepository: {operation} failed",
                extra={"error": str(exc), "error_code": error.error_code},
            )
            raise error from exc
        except Exception as exc:
            logger.error(
                f"PostgresUserRepository: {operation} failed",
                extra={"error": str(exc)},
            )
            raise DatabaseError(f"{operation} failed: {exc}", original_error=exc) from exc

    def create_user(
        self, first_name: str, last_name: str, email: str, password_hash: str
    ) -> User:
        row = self._fetch_one(
            f"SELECT {_USER_COLUMNS} FROM create_user(%s, %s, %s, %s)",
            (first_name, last_name, email, password_hash),
            "Create user",
        )
        if not row:
            raise DatabaseError("User creation failed: no row returned")
        return self._row_to_user(row)

    def get_user_by_email(self, email: str) -> Optional[User]:
        row = self._fetch_one(
            f"SELECT {_USER_COLUMNS} FROM get_user_by_email(%s)",
            (email,),
            "Get user by email",
        )
        return self._row_to_user(row) if row else None

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        if user_id > BIGINT_MAX:
            return None
        row = self._fetch_one(
            f"SELECT {_USER_COLUMNS} FROM get_user_by_id(%s::bigint)",
            (user_id,),
            "Get user by id",
        )
        return self._row_to_user(row) if row else None

    def get_all_users(self, limit: int, offset: int) -> List[User]:
        try:
            pool = self._get_pool()
            with pool.connection() as conn:
                rows = conn.execute(
                    f"SELECT {_USER_COLUMNS} FROM get_all_users(%s::int, %s::bigint)",
                    (limit, offset),
                ).fetchall()
        except Exception as exc:
            logger.error(
                "PostgresUserRepository: List users failed",
                extra={"error": str(exc), "limit": limit, "offset": offset},
            )
            raise DatabaseError(f"List users failed: {exc}", original_error=exc) from exc

        return [self._row_to_user(row) for row in rows]

    def count_users(self) -> int:
        row = self._fetch_one("SELECT COUNT(*) FROM users", (), "Count users")
        return int(row[0]) if row else 0

    def update_user(
        self,
        user_id: int,
        first_name: str,
        last_name: str,
        email: str,
        password_hash: Optional[str],
    ) -> User:
        if user_id > BIGINT_MAX:
            raise UserNotFoundError("User not found")
        row = self._fetch_one(
            f"SELECT {_USER_COLUMNS} FROM update_user(%s::bigint, %s, %s, %s, %s)",
            (user_id, first_name, last_name, email, password_hash),
            "Update user",
        )
        if not row:
            raise UserNotFoundError("User not found")
        return self._row_to_user(row)

    def delete_user(self, user_id: int) -> int:
        if user_id > BIGINT_MAX:
            raise UserNotFoundError("User not found")
        row = self._fetch_one(
            "SELECT deleted_rows FROM delete_user(%s::bigint)",
            (user_id,),
            "Delete user",
        )
        return int(row[0]) if row else 0

    def ping(self) -> bool:
        try:
            pool = self._get_pool()
            with pool.connection() as conn:
                conn.execute("SELECT 1").fetchone()
            return True
        except Exception as exc:
            logger.warning(
                "PostgresUserRepository: Ping failed", extra={"error": str(exc)}
            )
            return False
