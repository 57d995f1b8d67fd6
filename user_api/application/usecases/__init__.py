"""
Name: User Use Cases (package exports)

Responsibilities:
  - Re-export auth and directory use cases, their inputs and results
  - Define __all__ as the public contract of the application layer
"""

from .authenticate_token import AuthenticateTokenUseCase
from .create_user import CreateUserInput, CreateUserUseCase
from .delete_user import DeleteUserInput, DeleteUserUseCase
from .get_user import GetUserInput, GetUserUseCase
from .list_users import ListUsersInput, ListUsersUseCase
from .login_user import LoginUserInput, LoginUserUseCase
from .logout_user import LogoutUserInput, LogoutUserUseCase
from .refresh_token import RefreshTokenInput, RefreshTokenUseCase
from .register_user import RegisterUserInput, RegisterUserUseCase
from .update_user import UpdateUserInput, UpdateUserUseCase
from .user_results import (
    AuthenticatedUser,
    AuthenticateResult,
    AuthResult,
    DeleteUserResult,
    ListUsersResult,
    LogoutResult,
    RefreshResult,
    UserError,
    UserErrorCode,
    UserResult,
)

__all__ = [
    # Auth
    "AuthenticateTokenUseCase",
    "LoginUserInput",
    "LoginUserUseCase",
    "LogoutUserInput",
    "LogoutUserUseCase",
    "RefreshTokenInput",
    "RefreshTokenUseCase",
    "RegisterUserInput",
    "RegisterUserUseCase",
    # Directory
    "CreateUserInput",
    "CreateUserUseCase",
    "DeleteUserInput",
    "DeleteUserUseCase",
    "GetUserInput",
    "GetUserUseCase",
    "ListUsersInput",
    "ListUsersUseCase",
    "UpdateUserInput",
    "UpdateUserUseCase",
    # Results
    "AuthenticatedUser",
    "AuthenticateResult",
    "AuthResult",
    "DeleteUserResult",
    "ListUsersResult",
    "LogoutResult",
    "RefreshResult",
    "UserError",
    "UserErrorCode",
    "UserResult",
]
