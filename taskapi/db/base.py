"""Base model with common fields"""

from sqlalchemy import Column, Integer

from taskapi.db.database import Base as SQLAlchemyBase


class Base(SQLAlchemyBase):
    """Base model with an integer identity assigned by the database"""

    __abstract__ = True

    id = Column("id", Integer, primary_key=True, autoincrement=True)
