"""Infrastructure repositories"""

from .in_memory_user_repo import InMemoryUserRepository
from .postgres_user_repo import PostgresUserRepository

__all__ = [
    "InMemoryUserRepository",
    "PostgresUserRepository",
]
