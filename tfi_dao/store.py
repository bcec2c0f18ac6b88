"""Persistence boundary that data access objects delegate to."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable

from sqlalchemy import inspect, select
from sqlalchemy.orm import Session, scoped_session
from sqlalchemy.sql.base import Executable

from tfi_dao.criteria import Criteria

logger = logging.getLogger(__name__)


class Store(ABC):
    """Operations a persistence engine must offer to back a DAO."""

    @abstractmethod
    def load_all(self, model: type) -> list[Any]:
        """Return every persisted instance of ``model``."""
        ...

    @abstractmethod
    def get_by_id(self, model: type, identifier: Any) -> Any | None:
        """Return the instance of ``model`` with the given id, or ``None``."""
        ...

    @abstractmethod
    def save_or_update(self, entity: Any) -> Any:
        """Insert a new instance or update the record sharing its identity."""
        ...

    @abstractmethod
    def save_or_update_all(self, entities: Iterable[Any]) -> list[Any]:
        ...

    @abstractmethod
    def delete(self, entity: Any) -> None:
        ...

    @abstractmethod
    def delete_all(self, entities: Iterable[Any]) -> None:
        ...

    @abstractmethod
    def execute_update(self, statement: Executable, params: dict[str, Any] | None = None) -> int:
        """Execute a bulk INSERT/UPDATE/DELETE and return the affected row count."""
        ...

    @abstractmethod
    def find_by_criteria(self, criteria: Criteria) -> list[Any]:
        """Execute a detached query specification."""
        ...


class SessionStore(Store):
    """Store backed by a SQLAlchemy ``Session`` or ``scoped_session``.

    Writes are flushed so database generated values (ids, defaults) are
    visible right away. Committing stays with whoever owns the transaction.
    """

    def __init__(self, session: Session | scoped_session) -> None:
        self._session = session

    @property
    def session(self) -> Session | scoped_session:
        return self._session

    def load_all(self, model: type) -> list[Any]:
        return list(self._session.scalars(select(model)).all())

    def get_by_id(self, model: type, identifier: Any) -> Any | None:
        return self._session.get(model, identifier)

    def save_or_update(self, entity: Any) -> Any:
        managed = self._attach(entity)
        self._session.flush()
        logger.debug("Saved %r", managed)
        return managed

    def save_or_update_all(self, entities: Iterable[Any]) -> list[Any]:
        managed = [self._attach(entity) for entity in entities]
        self._session.flush()
        logger.debug("Saved %d entities", len(managed))
        return managed

    def delete(self, entity: Any) -> None:
        self._session.delete(entity)
        self._session.flush()
        logger.debug("Deleted %r", entity)

    def delete_all(self, entities: Iterable[Any]) -> None:
        count = 0
        for entity in entities:
            self._session.delete(entity)
            count += 1
        self._session.flush()
        logger.debug("Deleted %d entities", count)

    def execute_update(self, statement: Executable, params: dict[str, Any] | None = None) -> int:
        result = self._session.execute(statement, params)
        return result.rowcount

    def find_by_criteria(self, criteria: Criteria) -> list[Any]:
        if criteria.is_scalar:
            return list(self._session.scalars(criteria.statement).all())
        return list(self._session.execute(criteria.statement).all())

    def _attach(self, entity: Any) -> Any:
        state = inspect(entity)
        # A transient object that already carries its primary key refers to an
        # existing row: merge it instead of inserting a duplicate.
        if state.transient and not _has_null_identity(state):
            return self._session.merge(entity)
        self._session.add(entity)
        return entity


def _has_null_identity(state: Any) -> bool:
    identity = state.mapper.primary_key_from_instance(state.obj())
    return any(value is None for value in identity)
