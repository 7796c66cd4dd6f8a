"""
Shared API dependencies.

Builds the per-request service stack: session -> repository -> service.
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from user_api.db.database import get_db
from user_api.db.repositories.users import UserRepository
from user_api.services.user_service import UserService


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(UserRepository(db))
