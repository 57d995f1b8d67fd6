"""
Name: Refresh Token Use Case

Responsibilities:
  - Rotate the caller's token: issue a fresh one, revoke the presented one

Collaborators:
  - auth_users.create_access_token
  - domain.repositories.TokenDenylist

Constraints:
  - No grace window: only a token that passed authentication is refreshed
  - The new token is created only after this call won the old one's revocation;
    a token is rotated at most once
"""

from dataclasses import dataclass

from ...auth_users import create_access_token
from ...domain.repositories import TokenDenylist
from ...logger import logger
from .user_results import AuthenticatedUser, RefreshResult, unauthenticated


@dataclass
class RefreshTokenInput:
    principal: AuthenticatedUser | None = None


class RefreshTokenUseCase:
    """R: Exchange a valid token for a new one."""

    def __init__(self, denylist: TokenDenylist):
        self.denylist = denylist

    def execute(self, input_data: RefreshTokenInput) -> RefreshResult:
        principal = input_data.principal
        if principal is None:
            return RefreshResult(error=unauthenticated())

        # R: a concurrent refresh/logout of the same token already consumed it
        if not self.denylist.revoke(principal.claims.jti, principal.claims.expires_at):
            logger.info("Token rejected", extra={"reason": "already revoked"})
            return RefreshResult(error=unauthenticated())

        token = create_access_token(principal.user.id)
        logger.info("Token refreshed", extra={"user_id": principal.user.id})
        return RefreshResult(token=token)
