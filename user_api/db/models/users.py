from sqlalchemy import Column, Integer, String, Index
from .base import Base


class User(Base):
    __tablename__ = 'users'
    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(255), nullable=True)
    last_name = Column(String(255), nullable=True)
    age = Column(Integer, nullable=True)

    __table_args__ = (
        Index('idx_users_age', 'age'),
    )
