"""
Name: User Authentication Primitives (argon2 + JWT)

Responsibilities:
  - Hash and verify passwords using argon2id with configurable cost
  - Issue and decode signed bearer tokens (JWT, HS256)
  - Parse the Authorization header

Collaborators:
  - config.py: JWT secret/TTL and hashing cost
  - application.usecases: register/login/authenticate/refresh

Constraints:
  - Tokens carry only sub/iat/exp/jti; user attributes are always re-read
  - Plaintext passwords never leave this module except as argon2 input
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from uuid import uuid4

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError

from .config import get_settings

JWT_ALGORITHM = "HS256"
TOKEN_TYPE = "bearer"


class TokenError(Exception):
    """Presented token is malformed, badly signed or expired."""


@dataclass(frozen=True)
class AuthSettings:
    jwt_secret: str
    jwt_ttl_minutes: int


@dataclass(frozen=True)
class TokenClaims:
    user_id: int
    jti: str
    issued_at: int
    expires_at: int


@dataclass(frozen=True)
class IssuedToken:
    token: str
    expires_in: int
    claims: TokenClaims
    token_type: str = TOKEN_TYPE


def get_auth_settings() -> AuthSettings:
    settings = get_settings()
    return AuthSettings(
        jwt_secret=settings.jwt_secret,
        jwt_ttl_minutes=settings.jwt_ttl_minutes,
    )


@lru_cache
def get_password_hasher() -> PasswordHasher:
    """R: argon2id hasher built from the configured cost parameters."""
    settings = get_settings()
    return PasswordHasher(
        time_cost=settings.password_hash_time_cost,
        memory_cost=settings.password_hash_memory_cost,
        parallelism=settings.password_hash_parallelism,
    )


@lru_cache
def _dummy_password_hash() -> str:
    return get_password_hasher().hash(uuid4().hex)


def hash_password(password: str) -> str:
    """R: Hash a password using argon2id (salted)."""
    return get_password_hasher().hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """R: Verify password against stored hash."""
    try:
        return get_password_hasher().verify(password_hash, password)
    except (VerifyMismatchError, VerificationError, InvalidHashError):
        return False


def burn_password_check(password: str) -> None:
    """R: Spend one verification so unknown-email logins cost as much as real ones."""
    verify_password(password, _dummy_password_hash())


def create_access_token(
    user_id: int, settings: AuthSettings | None = None
) -> IssuedToken:
    """R: Create a signed JWT bound to user_id; every call yields a distinct jti."""
    auth_settings = settings or get_auth_settings()
    now = datetime.now(timezone.utc)
    expires_in = auth_settings.jwt_ttl_minutes * 60
    claims = TokenClaims(
        user_id=user_id,
        jti=uuid4().hex,
        issued_at=int(now.timestamp()),
        expires_at=int((now + timedelta(seconds=expires_in)).timestamp()),
    )
    payload = {
        "sub": str(claims.user_id),
        "jti": claims.jti,
        "iat": claims.issued_at,
        "exp": claims.expires_at,
    }
    token = jwt.encode(payload, auth_settings.jwt_secret, algorithm=JWT_ALGORITHM)
    return IssuedToken(token=token, expires_in=expires_in, claims=claims)


def decode_access_token(token: str, settings: AuthSettings | None = None) -> TokenClaims:
    """
    R: Verify signature and expiry, returning the token claims.

    Raises:
        TokenError: malformed, badly signed, expired or missing claims
    """
    auth_settings = settings or get_auth_settings()
    try:
        payload = jwt.decode(
            token,
            auth_settings.jwt_secret,
            algorithms=[JWT_ALGORITHM],
            options={"require": ["sub", "jti", "iat", "exp"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise TokenError("Token expired.") from exc
    except jwt.InvalidTokenError as exc:
        raise TokenError("Invalid token.") from exc

    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError) as exc:
        raise TokenError("Invalid token.") from exc

    return TokenClaims(
        user_id=user_id,
        jti=str(payload["jti"]),
        issued_at=int(payload["iat"]),
        expires_at=int(payload["exp"]),
    )


def extract_bearer_token(authorization: str | None) -> str | None:
    """R: Token from 'Authorization: Bearer <token>' or None."""
    if not authorization:
        return None
    parts = authorization.strip().split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1].strip() or None
