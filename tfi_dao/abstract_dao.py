"""Generic DAO that forwards every operation to an injected store."""

from __future__ import annotations

import logging
import numbers
from typing import Any, Iterable

from sqlalchemy import delete

from tfi_dao.criteria import Criteria
from tfi_dao.interfaces import Dao, T
from tfi_dao.store import Store

logger = logging.getLogger(__name__)


class AbstractDao(Dao[T]):
    """Base class for DAOs over one mapped entity type.

    Concrete DAOs pass their mapped class once, at construction::

        class BookDao(AbstractDao[Book]):
            def __init__(self, store: Store) -> None:
                super().__init__(store, model=Book)

    Store failures (connectivity, constraint violations, malformed queries)
    are never caught here; they reach the caller as raised by SQLAlchemy.
    """

    def __init__(self, store: Store, model: type[T]) -> None:
        if not isinstance(model, type):
            raise TypeError(f"DAO model must be a class, got {model!r}")
        self._store = store
        self._model = model

    @property
    def model(self) -> type[T]:
        """Return the entity class handled by this DAO."""
        return self._model

    @property
    def store(self) -> Store:
        return self._store

    def find_all(self) -> list[T]:
        return self._store.load_all(self._model)

    def find(self, identifier: Any) -> T | None:
        return self._store.get_by_id(self._model, identifier)

    def save(self, entity: T) -> T:
        return self._store.save_or_update(entity)

    def save_all(self, entities: Iterable[T]) -> list[T]:
        return self._store.save_or_update_all(list(entities))

    def delete(self, entity: T) -> None:
        identifier = entity.id
        if isinstance(identifier, numbers.Number) and not isinstance(identifier, bool):
            self.delete_by_id(int(identifier))
        else:
            self._store.delete(entity)

    def delete_by_id(self, identifier: Any) -> int:
        """Issue a single ``DELETE`` for the given id without loading the row."""
        statement = delete(self._model).where(self._model.id == identifier)
        affected = self._store.execute_update(statement)
        logger.debug("Deleted %s id=%s (%s row(s))", self._model.__name__, identifier, affected)
        return affected

    def delete_all(self, entities: Iterable[T]) -> None:
        self._store.delete_all(list(entities))

    # Helpers for subclasses building richer queries.

    def _criteria(self) -> Criteria:
        """Return a fresh query specification over this DAO's entity type."""
        return Criteria(self._model)

    def _unique(self, criteria: Criteria) -> Any | None:
        """Return the only match, or ``None`` when there are zero or several."""
        results = self._store.find_by_criteria(criteria)
        if len(results) == 1:
            return results[0]
        return None

    def _list(self, criteria: Criteria) -> list[Any]:
        return self._store.find_by_criteria(criteria)

    def _aggregate(self, criteria: Criteria) -> Any:
        """Return the value of an aggregate query, ``0`` when the store has none."""
        results = self._store.find_by_criteria(criteria)
        if not results or results[0] is None:
            return 0
        return results[0]

    def _save_object(self, obj: Any) -> Any:
        """Persist an auxiliary object that is not one of this DAO's entities."""
        return self._store.save_or_update(obj)

    def _delete_object(self, obj: Any) -> None:
        self._store.delete(obj)

    def _delete_where(self, criteria: Criteria) -> None:
        """Load every entity matching ``criteria`` and delete them."""
        self._store.delete_all(self._store.find_by_criteria(criteria))
