"""
Name: Auth Routes (JWT)

Responsibilities:
  - Handle register/login/logout/refresh for user authentication
  - Expose /auth/me for current user info
  - Map use case results onto the response envelope

Notes:
  - Body fields are typed loosely so the use cases produce per-field messages
"""

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from .application.usecases import (
    AuthenticatedUser,
    LoginUserInput,
    LoginUserUseCase,
    LogoutUserInput,
    LogoutUserUseCase,
    RefreshTokenInput,
    RefreshTokenUseCase,
    RegisterUserInput,
    RegisterUserUseCase,
)
from .auth_users import IssuedToken
from .container import (
    get_login_user_use_case,
    get_logout_user_use_case,
    get_refresh_token_use_case,
    get_register_user_use_case,
)
from .dependencies import require_user
from .error_responses import OPENAPI_ERROR_RESPONSES, error_response, success_response
from .users import User

router = APIRouter(prefix="/auth", tags=["auth"], responses=OPENAPI_ERROR_RESPONSES)


class RegisterRequest(BaseModel):
    first_name: Any = None
    last_name: Any = None
    email: Any = None
    password: Any = None


class LoginRequest(BaseModel):
    email: Any = None
    password: Any = None


def _token_payload(token: IssuedToken) -> dict[str, Any]:
    return {
        "token": token.token,
        "token_type": token.token_type,
        "expires_in": token.expires_in,
    }


def _auth_payload(user: User, token: IssuedToken) -> dict[str, Any]:
    return {"user": user.to_public_dict(), **_token_payload(token)}


@router.post("/register", status_code=201)
def register(
    req: RegisterRequest | None = None,
    use_case: RegisterUserUseCase = Depends(get_register_user_use_case),
):
    """R: Create an account and return a token for it."""
    req = req or RegisterRequest()
    result = use_case.execute(
        RegisterUserInput(
            first_name=req.first_name,
            last_name=req.last_name,
            email=req.email,
            password=req.password,
        )
    )
    if result.error is not None:
        return error_response(result.error)
    return success_response(
        _auth_payload(result.user, result.token),
        message="User registered successfully",
        status_code=201,
    )


@router.post("/login")
def login(
    req: LoginRequest | None = None,
    use_case: LoginUserUseCase = Depends(get_login_user_use_case),
):
    """R: Exchange email + password for a token."""
    req = req or LoginRequest()
    result = use_case.execute(LoginUserInput(email=req.email, password=req.password))
    if result.error is not None:
        return error_response(result.error)
    return success_response(
        _auth_payload(result.user, result.token), message="Login successful"
    )


@router.post("/logout")
def logout(
    principal: AuthenticatedUser = Depends(require_user),
    use_case: LogoutUserUseCase = Depends(get_logout_user_use_case),
):
    """R: Revoke the presented token."""
    result = use_case.execute(LogoutUserInput(principal=principal))
    if result.error is not None:
        return error_response(result.error)
    return success_response(message="Logged out successfully")


@router.get("/me")
def me(principal: AuthenticatedUser = Depends(require_user)):
    """R: Return the current user with attributes re-read at authentication."""
    return success_response(principal.user.to_public_dict())


@router.post("/refresh")
def refresh(
    principal: AuthenticatedUser = Depends(require_user),
    use_case: RefreshTokenUseCase = Depends(get_refresh_token_use_case),
):
    """R: Rotate the presented token."""
    result = use_case.execute(RefreshTokenInput(principal=principal))
    if result.error is not None:
        return error_response(result.error)
    return success_response(_token_payload(result.token))
