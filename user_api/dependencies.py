"""
Name: HTTP Dependencies

Responsibilities:
  - Resolve the caller identity from the Authorization header
  - Hand the resolved AuthenticatedUser to protected routes explicitly

Collaborators:
  - auth_users.extract_bearer_token
  - application.usecases.AuthenticateTokenUseCase
  - error_responses.app_error
"""

from fastapi import Depends, Header

from .application.usecases import AuthenticatedUser, AuthenticateTokenUseCase
from .auth_users import extract_bearer_token
from .container import get_authenticate_token_use_case
from .error_responses import app_error


def require_user(
    authorization: str | None = Header(default=None),
    use_case: AuthenticateTokenUseCase = Depends(get_authenticate_token_use_case),
) -> AuthenticatedUser:
    """R: Authentication gate for every protected route (401 envelope on failure)."""
    result = use_case.execute(extract_bearer_token(authorization))
    if result.error is not None:
        raise app_error(result.error)
    return result.principal
