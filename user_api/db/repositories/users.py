"""
User repository.

Translates `UserQuery` specifications into ORM queries and persists new
users. The repository is bound to one session for its whole lifetime.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from user_api.db import models, schemas

logger = logging.getLogger(__name__)

# Sort keys accepted by UserQuery.order_by
SORT_COLUMNS = {
    "id": models.User.id,
    "first_name": models.User.first_name,
    "last_name": models.User.last_name,
    "age": models.User.age,
}


@dataclass(frozen=True)
class UserQuery:
    """Filter and ordering for a user listing.

    ``min_age`` keeps rows whose age is greater than or equal to the threshold;
    rows with no age never match. ``order_by`` names a column from
    ``SORT_COLUMNS`` sorted ascending. ``None`` for either means no filter or
    store-native order.
    """

    min_age: Optional[int] = None
    order_by: Optional[str] = None


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def find(self, query: UserQuery) -> List[models.User]:
        q = self.db.query(models.User)
        if query.min_age is not None:
            q = q.filter(models.User.age >= query.min_age)
        if query.order_by:
            column = SORT_COLUMNS.get(query.order_by)
            if column is None:
                raise ValueError(f"Unsupported sort key: {query.order_by}")
            q = q.order_by(column.asc())
        return q.all()

    def find_all(self) -> List[models.User]:
        return self.find(UserQuery())

    def save(self, user: schemas.UserCreate) -> models.User:
        db_user = models.User(
            first_name=user.first_name,
            last_name=user.last_name,
            age=user.age,
        )
        try:
            self.db.add(db_user)
            self.db.commit()
            self.db.refresh(db_user)
        except SQLAlchemyError:
            self.db.rollback()
            raise
        return db_user
