"""
Name: Authentication Primitive Tests

Responsibilities:
  - argon2 hashing and verification
  - JWT issuance and decoding (claims, expiry, tampering)
  - Authorization header parsing
"""

import time

import jwt
import pytest

from user_api.auth_users import (
    JWT_ALGORITHM,
    AuthSettings,
    TokenError,
    burn_password_check,
    create_access_token,
    decode_access_token,
    extract_bearer_token,
    hash_password,
    verify_password,
)


pytestmark = pytest.mark.unit

SETTINGS = AuthSettings(jwt_secret="unit-test-secret", jwt_ttl_minutes=5)


class TestPasswordHashing:
    def test_hash_is_not_plaintext_and_verifies(self):
        password_hash = hash_password("secret123")

        assert password_hash != "secret123"
        assert password_hash.startswith("$argon2id$")
        assert verify_password("secret123", password_hash) is True

    def test_wrong_password_does_not_verify(self):
        assert verify_password("other", hash_password("secret123")) is False

    def test_hashes_are_salted(self):
        assert hash_password("secret123") != hash_password("secret123")

    def test_malformed_hash_does_not_verify(self):
        assert verify_password("secret123", "not-a-hash") is False

    def test_burn_password_check_returns_nothing(self):
        assert burn_password_check("anything") is None


class TestAccessTokens:
    def test_round_trip_claims(self):
        issued = create_access_token(42, settings=SETTINGS)

        claims = decode_access_token(issued.token, settings=SETTINGS)

        assert claims == issued.claims
        assert claims.user_id == 42
        assert issued.expires_in == 300
        assert issued.token_type == "bearer"
        assert claims.expires_at - claims.issued_at == 300

    def test_every_token_is_distinct(self):
        first = create_access_token(1, settings=SETTINGS)
        second = create_access_token(1, settings=SETTINGS)

        assert first.token != second.token
        assert first.claims.jti != second.claims.jti

    def test_subject_is_a_string_claim(self):
        issued = create_access_token(7, settings=SETTINGS)

        payload = jwt.decode(
            issued.token, SETTINGS.jwt_secret, algorithms=[JWT_ALGORITHM]
        )

        assert payload["sub"] == "7"
        assert set(payload) == {"sub", "jti", "iat", "exp"}

    def test_expired_token_is_rejected(self):
        now = int(time.time())
        token = jwt.encode(
            {"sub": "1", "jti": "abc", "iat": now - 120, "exp": now - 60},
            SETTINGS.jwt_secret,
            algorithm=JWT_ALGORITHM,
        )

        with pytest.raises(TokenError, match="expired"):
            decode_access_token(token, settings=SETTINGS)

    def test_wrong_secret_is_rejected(self):
        issued = create_access_token(1, settings=SETTINGS)
        other = AuthSettings(jwt_secret="another-secret", jwt_ttl_minutes=5)

        with pytest.raises(TokenError):
            decode_access_token(issued.token, settings=other)

    def test_missing_jti_is_rejected(self):
        now = int(time.time())
        token = jwt.encode(
            {"sub": "1", "iat": now, "exp": now + 60},
            SETTINGS.jwt_secret,
            algorithm=JWT_ALGORITHM,
        )

        with pytest.raises(TokenError):
            decode_access_token(token, settings=SETTINGS)

    def test_non_numeric_subject_is_rejected(self):
        now = int(time.time())
        token = jwt.encode(
            {"sub": "abc", "jti": "x", "iat": now, "exp": now + 60},
            SETTINGS.jwt_secret,
            algorithm=JWT_ALGORITHM,
        )

        with pytest.raises(TokenError):
            decode_access_token(token, settings=SETTINGS)

    def test_garbage_is_rejected(self):
        with pytest.raises(TokenError):
            decode_access_token("not.a.jwt", settings=SETTINGS)


class TestExtractBearerToken:
    @pytest.mark.parametrize(
        "header, expected",
        [
            ("Bearer abc", "abc"),
            ("bearer abc", "abc"),
            ("  Bearer   abc  ", "abc"),
            ("Basic abc", None),
            ("Bearer", None),
            ("Bearer ", None),
            ("", None),
            (None, None),
        ],
    )
    def test_parsing(self, header, expected):
        assert extract_bearer_token(header) == expected
