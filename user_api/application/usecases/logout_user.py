"""
Name: Logout User Use Case

Responsibilities:
  - Revoke the caller's current token until its natural expiry

Collaborators:
  - domain.repositories.TokenDenylist
"""

from dataclasses import dataclass

from ...domain.repositories import TokenDenylist
from ...logger import logger
from .user_results import AuthenticatedUser, LogoutResult, unauthenticated


@dataclass
class LogoutUserInput:
    principal: AuthenticatedUser | None = None


class LogoutUserUseCase:
    """R: Invalidate the presented token."""

    def __init__(self, denylist: TokenDenylist):
        self.denylist = denylist

    def execute(self, input_data: LogoutUserInput) -> LogoutResult:
        principal = input_data.principal
        if principal is None:
            return LogoutResult(error=unauthenticated())

        if not self.denylist.revoke(principal.claims.jti, principal.claims.expires_at):
            return LogoutResult(error=unauthenticated())

        logger.info("Logged out", extra={"user_id": principal.user.id})
        return LogoutResult(logged_out=True)
