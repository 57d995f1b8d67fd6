"""Add users table and the stored functions the API calls.

Revision ID: 001_users_and_functions
Revises:
Create Date: 2026-10-19

"""

from alembic import op
import sqlalchemy as sa

revision: str = "001_users_and_functions"
down_revision: str | None = None
branch_labels: str | None = None
depends_on: str | None = None


FUNCTIONS = [
    """
    CREATE OR REPLACE FUNCTION create_user(
        p_first_name VARCHAR, p_last_name VARCHAR, p_email VARCHAR, p_password_hash TEXT
    ) RETURNS SETOF users
    LANGUAGE sql AS $$
        INSERT INTO users (first_name, last_name, email, password_hash)
        VALUES (p_first_name, p_last_name, p_email, p_password_hash)
        RETURNING *;
    $$
    """,
    """
    CREATE OR REPLACE FUNCTION get_user_by_email(p_email VARCHAR)
    RETURNS SETOF users
    LANGUAGE sql STABLE AS $$
        SELECT * FROM users WHERE email = p_email;
    $$
    """,
    """
    CREATE OR REPLACE FUNCTION get_user_by_id(p_id BIGINT)
    RETURNS SETOF users
    LANGUAGE sql STABLE AS $$
        SELECT * FROM users WHERE id = p_id;
    $$
    """,
    """
    CREATE OR REPLACE FUNCTION get_all_users(p_limit INTEGER, p_offset BIGINT)
    RETURNS SETOF users
    LANGUAGE sql STABLE AS $$
        SELECT * FROM users ORDER BY id LIMIT p_limit OFFSET p_offset;
    $$
    """,
    # NULL password hash leaves the stored one untouched
    """
    CREATE OR REPLACE FUNCTION update_user(
        p_id BIGINT, p_first_name VARCHAR, p_last_name VARCHAR, p_email VARCHAR,
        p_password_hash TEXT
    ) RETURNS SETOF users
    LANGUAGE plpgsql AS $$
    BEGIN
        RETURN QUERY
        UPDATE users SET
            first_name = p_first_name,
            last_name = p_last_name,
            email = p_email,
            password_hash = COALESCE(p_password_hash, users.password_hash),
            updated_at = now()
        WHERE users.id = p_id
        RETURNING users.*;
        IF NOT FOUND THEN
            RAISE EXCEPTION 'user % not found', p_id USING ERRCODE = 'P0002';
        END IF;
    END;
    $$
    """,
    """
    CREATE OR REPLACE FUNCTION delete_user(p_id BIGINT)
    RETURNS TABLE (deleted_rows INTEGER)
    LANGUAGE plpgsql AS $$
    DECLARE
        n INTEGER;
    BEGIN
        DELETE FROM users WHERE users.id = p_id;
        GET DIAGNOSTICS n = ROW_COUNT;
        IF n = 0 THEN
            RAISE EXCEPTION 'user % not found', p_id USING ERRCODE = 'P0002';
        END IF;
        RETURN QUERY SELECT n;
    END;
    $$
    """,
]

FUNCTION_SIGNATURES = [
    "create_user(VARCHAR, VARCHAR, VARCHAR, TEXT)",
    "get_user_by_email(VARCHAR)",
    "get_user_by_id(BIGINT)",
    "get_all_users(INTEGER, BIGINT)",
    "update_user(BIGINT, VARCHAR, VARCHAR, VARCHAR, TEXT)",
    "delete_user(BIGINT)",
]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.BigInteger, sa.Identity(), primary_key=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(150), nullable=False, unique=True),
        sa.Column("password_hash", sa.Text, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    for statement in FUNCTIONS:
        op.execute(statement)


def downgrade() -> None:
    for signature in reversed(FUNCTION_SIGNATURES):
        op.execute(f"DROP FUNCTION IF EXISTS {signature}")
    op.drop_table("users")
