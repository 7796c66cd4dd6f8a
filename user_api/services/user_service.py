"""
User service.

Thin layer between the HTTP handlers and `UserRepository`; it adds no rules of
its own beyond choosing the query shape for each operation.
"""
import logging
from typing import List

from user_api.db import models, schemas
from user_api.db.repositories.users import UserQuery, UserRepository

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, repository: UserRepository):
        self.repository = repository

    def find_all_users(self) -> List[models.User]:
        return self.repository.find_all()

    def save_user(self, user: schemas.UserCreate) -> models.User:
        created = self.repository.save(user)
        logger.info("user_created: id=%s", created.id)
        return created

    def find_users_by_min_age(self, age: int) -> List[models.User]:
        """Users aged ``age`` or older, ordered by first name ascending."""
        users = self.repository.find(UserQuery(min_age=age, order_by="first_name"))
        logger.debug("users_by_min_age: age=%s count=%d", age, len(users))
        return users
