"""
Name: User Models

Responsibilities:
  - Define the user entity returned by the persistence boundary
  - Provide the outward (hash-free) representation
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass
class User:
    """R: User row as returned by the stored functions."""

    id: int
    first_name: str
    last_name: str
    email: str
    password_hash: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_public_dict(self) -> dict[str, Any]:
        """R: Serializable view; password_hash is never included."""
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
