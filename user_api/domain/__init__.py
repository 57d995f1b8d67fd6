"""Domain contracts"""

from .repositories import TokenDenylist, UserRepository

__all__ = ["TokenDenylist", "UserRepository"]
