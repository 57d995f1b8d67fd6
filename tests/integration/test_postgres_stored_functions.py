"""
Name: PostgreSQL User Repository Integration Tests

Responsibilities:
  - Run the repository against real stored functions
  - Verify SQLSTATE mapping for duplicate email and missing rows

Notes:
  - Requires RUN_INTEGRATION=1 and DATABASE_URL pointing at a migrated
    database (alembic upgrade head)
"""

import os
from uuid import uuid4

import pytest

from user_api.exceptions import DuplicateEmailError, UserNotFoundError


pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        os.getenv("RUN_INTEGRATION") != "1",
        reason="Set RUN_INTEGRATION=1 to run PostgreSQL integration tests",
    ),
]


@pytest.fixture
def pg_repository():
    from psycopg_pool import ConnectionPool

    from user_api.infrastructure.repositories import PostgresUserRepository

    pool = ConnectionPool(
        conninfo=os.environ["DATABASE_URL"], min_size=1, max_size=2, open=True
    )
    try:
        with pool.connection() as conn:
            conn.execute("TRUNCATE users RESTART IDENTITY")
        yield PostgresUserRepository(pool=pool)
    finally:
        pool.close()


def _email() -> str:
    return f"{uuid4().hex[:12]}@example.com"


def test_create_and_fetch(pg_repository):
    email = _email()

    created = pg_repository.create_user("Ada", "Lovelace", email, "hash")

    assert created.id > 0
    assert pg_repository.get_user_by_email(email).id == created.id
    assert pg_repository.get_user_by_id(created.id).email == email
    assert pg_repository.count_users() == 1


def test_duplicate_email(pg_repository):
    email = _email()
    pg_repository.create_user("Ada", "Lovelace", email, "hash")

    with pytest.raises(DuplicateEmailError):
        pg_repository.create_user("Ada", "Lovelace", email, "hash")


def test_update_keeps_hash_on_null(pg_repository):
    user = pg_repository.create_user("Ada", "Lovelace", _email(), "original")

    updated = pg_repository.update_user(user.id, "Ada", "King", user.email, None)

    assert updated.password_hash == "original"
    assert updated.last_name == "King"


def test_update_missing(pg_repository):
    with pytest.raises(UserNotFoundError):
        pg_repository.update_user(999999, "A", "B", _email(), None)


def test_list_in_insertion_order(pg_repository):
    ids = [pg_repository.create_user("U", str(i), _email(), "h").id for i in range(5)]

    page = pg_repository.get_all_users(2, 2)

    assert [u.id for u in page] == ids[2:4]


def test_delete(pg_repository):
    user = pg_repository.create_user("Ada", "Lovelace", _email(), "hash")

    assert pg_repository.delete_user(user.id) == 1
    with pytest.raises(UserNotFoundError):
        pg_repository.delete_user(user.id)
