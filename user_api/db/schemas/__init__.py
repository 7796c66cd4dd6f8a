"""
Pydantic schemas for request and response bodies.
"""

from .users import UserBase, UserCreate, User

__all__ = [
    "UserBase",
    "UserCreate",
    "User",
]
