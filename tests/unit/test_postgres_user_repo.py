"""
Name: PostgreSQL User Repository Unit Tests

Responsibilities:
  - Verify the stored-function calls (SQL text + positional params)
  - Verify row mapping into User
  - Verify SQLSTATE classification into typed errors

Notes:
  - The pool is a MagicMock; no database is needed
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import psycopg
import pytest

from user_api.exceptions import DatabaseError, DuplicateEmailError, UserNotFoundError
from user_api.infrastructure.db import PoolNotInitializedError, reset_pool
from user_api.infrastructure.repositories import PostgresUserRepository


pytestmark = pytest.mark.unit

NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)
ROW = (1, "Ada", "Lovelace", "ada@example.com", "hash", NOW, NOW)


def _repo():
    pool = MagicMock()
    conn = pool.connection.return_value.__enter__.return_value
    return PostgresUserRepository(pool=pool), conn


def test_create_user_calls_stored_function():
    repo, conn = _repo()
    conn.execute.return_value.fetchone.return_value = ROW

    user = repo.create_user("Ada", "Lovelace", "ada@example.com", "hash")

    query, params = conn.execute.call_args.args
    assert "FROM create_user(%s, %s, %s, %s)" in query
    assert params == ("Ada", "Lovelace", "ada@example.com", "hash")
    assert user.id == 1
    assert user.created_at == NOW


def test_get_user_by_email_returns_none_when_empty():
    repo, conn = _repo()
    conn.execute.return_value.fetchone.return_value = None

    assert repo.get_user_by_email("nobody@example.com") is None
    assert "FROM get_user_by_email(%s)" in conn.execute.call_args.args[0]


def test_get_user_by_id():
    repo, conn = _repo()
    conn.execute.return_value.fetchone.return_value = ROW

    user = repo.get_user_by_id(1)

    query, params = conn.execute.call_args.args
    assert user.email == "ada@example.com"
    assert "FROM get_user_by_id(%s::bigint)" in query
    assert params == (1,)


def test_get_all_users_passes_limit_and_offset():
    repo, conn = _repo()
    conn.execute.return_value.fetchall.return_value = [ROW, ROW]

    users = repo.get_all_users(10, 20)

    query, params = conn.execute.call_args.args
    assert "FROM get_all_users(%s::int, %s::bigint)" in query
    assert params == (10, 20)
    assert len(users) == 2


def test_count_users():
    repo, conn = _repo()
    conn.execute.return_value.fetchone.return_value = (25,)

    assert repo.count_users() == 25


def test_update_user_passes_null_hash():
    repo, conn = _repo()
    conn.execute.return_value.fetchone.return_value = ROW

    repo.update_user(1, "Ada", "Lovelace", "ada@example.com", None)

    query, params = conn.execute.call_args.args
    assert "FROM update_user(%s::bigint, %s, %s, %s, %s)" in query
    assert params == (1, "Ada", "Lovelace", "ada@example.com", None)


def test_delete_user_returns_deleted_rows():
    repo, conn = _repo()
    conn.execute.return_value.fetchone.return_value = (1,)

    assert repo.delete_user(1) == 1
    assert "deleted_rows FROM delete_user(%s::bigint)" in conn.execute.call_args.args[0]


def test_get_all_users_offset_beyond_int32_is_cast_to_bigint():
    repo, conn = _repo()
    conn.execute.return_value.fetchall.return_value = []

    assert repo.get_all_users(10, 2_999_999_990) == []

    query, params = conn.execute.call_args.args
    assert "%s::bigint" in query
    assert params == (10, 2_999_999_990)


def test_ids_beyond_bigint_never_reach_the_database():
    repo, conn = _repo()
    huge = 10**19

    assert repo.get_user_by_id(huge) is None
    with pytest.raises(UserNotFoundError):
        repo.update_user(huge, "Ada", "Lovelace", "ada@example.com", None)
    with pytest.raises(UserNotFoundError):
        repo.delete_user(huge)

    conn.execute.assert_not_called()


def test_unique_violation_maps_to_duplicate_email():
    repo, conn = _repo()
    conn.execute.side_effect = psycopg.errors.UniqueViolation("duplicate key")

    with pytest.raises(DuplicateEmailError):
        repo.create_user("Ada", "Lovelace", "ada@example.com", "hash")


def test_no_data_found_maps_to_user_not_found():
    repo, conn = _repo()
    conn.execute.side_effect = psycopg.errors.NoDataFound("user 9 not found")

    with pytest.raises(UserNotFoundError):
        repo.delete_user(9)


def test_other_driver_errors_map_to_database_error():
    repo, conn = _repo()
    conn.execute.side_effect = psycopg.errors.QueryCanceled("statement timeout")

    with pytest.raises(DatabaseError) as exc_info:
        repo.get_user_by_id(1)

    assert not isinstance(exc_info.value, (DuplicateEmailError, UserNotFoundError))
    assert "Get user by id failed" in exc_info.value.message


def test_classification_ignores_message_text():
    repo, conn = _repo()
    conn.execute.side_effect = psycopg.OperationalError("Duplicate entry")

    with pytest.raises(DatabaseError) as exc_info:
        repo.create_user("Ada", "Lovelace", "ada@example.com", "hash")

    assert not isinstance(exc_info.value, DuplicateEmailError)


def test_ping_failure_returns_false():
    repo, conn = _repo()
    conn.execute.side_effect = psycopg.OperationalError("down")

    assert repo.ping() is False


def test_uninitialized_pool_is_a_database_error():
    reset_pool()
    repo = PostgresUserRepository()

    with pytest.raises(DatabaseError) as exc_info:
        repo.get_user_by_id(1)

    assert isinstance(exc_info.value.original_error, PoolNotInitializedError)
