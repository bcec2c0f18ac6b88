"""SQLAlchemy declarative base for entities handled by the DAO layer."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


metadata = Base.metadata
