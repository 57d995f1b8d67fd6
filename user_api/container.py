"""
Name: Dependency Injection Container

Responsibilities:
  - Wire up repositories and the token denylist
  - Provide factory functions for use cases
  - Enable dependency injection in FastAPI endpoints

Collaborators:
  - infrastructure.repositories: PostgresUserRepository, InMemoryUserRepository
  - infrastructure.token_denylist: create_token_denylist
  - application.usecases
  - FastAPI Depends(): Dependency injection mechanism

Constraints:
  - Manual DI (no library like dependency-injector)
  - Singletons via functools.lru_cache

Notes:
  - This is the composition root (where dependencies are wired)
  - Tests override these with app.dependency_overrides or cache_clear()
"""

from functools import lru_cache

from .application.usecases import (
    AuthenticateTokenUseCase,
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    LoginUserUseCase,
    LogoutUserUseCase,
    RefreshTokenUseCase,
    RegisterUserUseCase,
    UpdateUserUseCase,
)
from .config import get_settings
from .domain.repositories import TokenDenylist, UserRepository
from .infrastructure.repositories import (
    InMemoryUserRepository,
    PostgresUserRepository,
)
from .infrastructure.token_denylist import create_token_denylist


# R: Repository factory (singleton)
@lru_cache
def get_user_repository() -> UserRepository:
    """
    R: Get singleton instance of the user repository.

    Returns:
        PostgreSQL (stored functions) or in-memory implementation,
        selected by USER_REPOSITORY
    """
    if get_settings().user_repository == "memory":
        return InMemoryUserRepository()
    return PostgresUserRepository()


@lru_cache
def get_token_denylist() -> TokenDenylist:
    """R: Get singleton instance of the revoked-token store."""
    return create_token_denylist(get_settings())


# R: Use case factories (new instance per request)
def get_register_user_use_case() -> RegisterUserUseCase:
    return RegisterUserUseCase(repository=get_user_repository())


def get_login_user_use_case() -> LoginUserUseCase:
    return LoginUserUseCase(repository=get_user_repository())


def get_authenticate_token_use_case() -> AuthenticateTokenUseCase:
    return AuthenticateTokenUseCase(
        repository=get_user_repository(),
        denylist=get_token_denylist(),
    )


def get_logout_user_use_case() -> LogoutUserUseCase:
    return LogoutUserUseCase(denylist=get_token_denylist())


def get_refresh_token_use_case() -> RefreshTokenUseCase:
    return RefreshTokenUseCase(denylist=get_token_denylist())


def get_list_users_use_case() -> ListUsersUseCase:
    return ListUsersUseCase(repository=get_user_repository())


def get_create_user_use_case() -> CreateUserUseCase:
    return CreateUserUseCase(repository=get_user_repository())


def get_get_user_use_case() -> GetUserUseCase:
    return GetUserUseCase(repository=get_user_repository())


def get_update_user_use_case() -> UpdateUserUseCase:
    return UpdateUserUseCase(repository=get_user_repository())


def get_delete_user_use_case() -> DeleteUserUseCase:
    return DeleteUserUseCase(repository=get_user_repository())
