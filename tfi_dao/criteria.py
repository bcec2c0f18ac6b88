"""Detached query specifications built against one entity type."""

from __future__ import annotations

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.sql.expression import Select


class Criteria:
    """Immutable wrapper around a ``Select`` bound to a mapped class.

    Every builder method returns a new ``Criteria`` so a base specification can
    be shared and refined independently. No session is involved until a store
    executes :attr:`statement`.
    """

    def __init__(self, model: type, statement: Select | None = None) -> None:
        self._model = model
        self._statement = statement if statement is not None else select(model)

    @property
    def model(self) -> type:
        return self._model

    @property
    def statement(self) -> Select:
        return self._statement

    @property
    def is_scalar(self) -> bool:
        """True when each result row holds a single entity or value."""
        return len(self._statement.column_descriptions) == 1

    def _derive(self, statement: Select) -> Criteria:
        return Criteria(self._model, statement)

    def filter(self, *conditions: Any) -> Criteria:
        return self._derive(self._statement.where(*conditions))

    def filter_by(self, **values: Any) -> Criteria:
        return self._derive(self._statement.filter_by(**values))

    def order_by(self, *clauses: Any) -> Criteria:
        return self._derive(self._statement.order_by(*clauses))

    def limit(self, count: int) -> Criteria:
        return self._derive(self._statement.limit(count))

    def offset(self, count: int) -> Criteria:
        return self._derive(self._statement.offset(count))

    def project(self, *columns: Any) -> Criteria:
        """Select the given columns instead of whole entities, keeping filters."""
        statement = self._statement.with_only_columns(*columns).select_from(self._model)
        return self._derive(statement)

    def aggregate(self, expression: Any) -> Criteria:
        """Select a single aggregate value; any ordering is dropped."""
        return self._derive(self.project(expression).statement.order_by(None))

    def count(self, column: Any = None) -> Criteria:
        expression = func.count(column) if column is not None else func.count()
        return self.aggregate(expression)

    def __repr__(self) -> str:  # pragma: no cover - debug helper only
        return f"Criteria(model={self._model.__name__}, statement={str(self._statement)!r})"
