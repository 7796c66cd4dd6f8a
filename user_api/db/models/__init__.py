"""
SQLAlchemy models.

Exposes `Base` and the ORM classes so callers can import them from
`user_api.db.models` directly.
"""

from .base import Base  # re-export
from .users import User

__all__ = [
    "Base",
    "User",
]
