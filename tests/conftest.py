"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Configure a hermetic test environment (in-memory store, cheap argon2)
  - Reset cached singletons between tests
  - Provide an HTTP client and user/token factories

Collaborators:
  - pytest: Test framework
  - fastapi.testclient: HTTP testing
  - user_api.container: singleton factories cleared per test

Notes:
  - Env vars are set BEFORE importing user_api (settings are read at import)
"""

import os
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

os.environ["APP_ENV"] = "test"
os.environ["USER_REPOSITORY"] = "memory"
os.environ["TOKEN_DENYLIST_BACKEND"] = "memory"
os.environ["JWT_SECRET"] = "test-secret-for-unit-tests-only-0123456789"
os.environ["JWT_TTL_MINUTES"] = "60"
os.environ["PASSWORD_HASH_TIME_COST"] = "1"
os.environ["PASSWORD_HASH_MEMORY_COST"] = "1024"
os.environ["PASSWORD_HASH_PARALLELISM"] = "1"
os.environ["DEV_SEED_USER"] = "0"

from user_api import config as app_config  # noqa: E402

app_config.Settings.model_config["env_file"] = None

from fastapi.testclient import TestClient  # noqa: E402

from user_api import auth_users, container  # noqa: E402
from user_api.infrastructure.repositories import InMemoryUserRepository  # noqa: E402
from user_api.infrastructure.token_denylist import InMemoryTokenDenylist  # noqa: E402


def _clear_caches() -> None:
    app_config.get_settings.cache_clear()
    auth_users.get_password_hasher.cache_clear()
    auth_users._dummy_password_hash.cache_clear()
    container.get_user_repository.cache_clear()
    container.get_token_denylist.cache_clear()


@pytest.fixture(autouse=True)
def reset_singletons():
    """R: Fresh settings, store and denylist for every test."""
    _clear_caches()
    yield
    _clear_caches()


@pytest.fixture
def repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def denylist() -> InMemoryTokenDenylist:
    return InMemoryTokenDenylist()


@pytest.fixture
def client():
    from user_api.main import app

    with TestClient(app) as test_client:
        yield test_client


def user_payload(**overrides) -> dict:
    payload = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@example.com",
        "password": "secret123",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def register(client):
    """R: Register through the API and return the response body."""

    def _register(**overrides) -> dict:
        response = client.post("/auth/register", json=user_payload(**overrides))
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest.fixture
def auth_headers(register):
    """R: Bearer headers for a freshly registered user."""
    body = register(email="caller@example.com")
    return {"Authorization": f"Bearer {body['data']['token']}"}


@pytest.fixture
def make_payload():
    return user_payload
