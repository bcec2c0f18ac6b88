"""Generic data access objects over SQLAlchemy sessions."""

from .abstract_dao import AbstractDao
from .criteria import Criteria
from .enum_dao import EnumDao, OrdinalEnum, OrdinalOutOfRangeError
from .interfaces import Dao, Identifiable, ReadOnlyDao
from .store import SessionStore, Store

__all__ = [
    "AbstractDao",
    "Criteria",
    "Dao",
    "EnumDao",
    "Identifiable",
    "OrdinalEnum",
    "OrdinalOutOfRangeError",
    "ReadOnlyDao",
    "SessionStore",
    "Store",
]
