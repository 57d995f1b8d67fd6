"""
Name: Authenticate Token Use Case

Responsibilities:
  - Verify a presented bearer token (signature, expiry, revocation)
  - Resolve the bound user with current attributes

Collaborators:
  - auth_users.decode_access_token
  - domain.repositories.UserRepository, TokenDenylist

Notes:
  - Every protected operation takes the AuthenticatedUser produced here
"""

from ...auth_users import TokenError, decode_access_token
from ...domain.repositories import TokenDenylist, UserRepository
from ...exceptions import DatabaseError
from ...logger import logger
from .user_results import (
    AuthenticatedUser,
    AuthenticateResult,
    unauthenticated,
    unexpected,
)


class AuthenticateTokenUseCase:
    """R: Resolve the caller identity from a bearer token."""

    def __init__(self, repository: UserRepository, denylist: TokenDenylist):
        self.repository = repository
        self.denylist = denylist

    def execute(self, token: str | None) -> AuthenticateResult:
        if not token:
            return AuthenticateResult(error=unauthenticated())

        try:
            claims = decode_access_token(token)
        except TokenError as exc:
            logger.info("Token rejected", extra={"reason": str(exc)})
            return AuthenticateResult(error=unauthenticated())

        try:
            if self.denylist.is_revoked(claims.jti):
                logger.info("Token rejected", extra={"reason": "revoked"})
                return AuthenticateResult(error=unauthenticated())
            user = self.repository.get_user_by_id(claims.user_id)
        except DatabaseError as exc:
            logger.error(
                "Authentication failed",
                extra={"error_id": exc.error_id, "error_message": exc.message},
            )
            return AuthenticateResult(
                error=unexpected("Authentication failed", exc.message)
            )

        if user is None:
            logger.info(
                "Token rejected",
                extra={"reason": "user missing", "user_id": claims.user_id},
            )
            return AuthenticateResult(error=unauthenticated())

        return AuthenticateResult(
            principal=AuthenticatedUser(user=user, claims=claims)
        )
