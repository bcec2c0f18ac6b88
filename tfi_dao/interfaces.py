"""Contracts shared by every data access object."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Iterable, Protocol, TypeVar, runtime_checkable


@runtime_checkable
class Identifiable(Protocol):
    """Anything persisted through a DAO exposes a stable identity value."""

    id: Any


T = TypeVar("T", bound=Identifiable)


class ReadOnlyDao(ABC, Generic[T]):
    """Read access to every entity of one type."""

    @abstractmethod
    def find_all(self) -> list[T]:
        """Return all entities; an empty list when there are none."""
        ...

    @abstractmethod
    def find(self, identifier: Any) -> T | None:
        """Return the entity with the given id."""
        ...


class Dao(ReadOnlyDao[T]):
    """Read and write access to every entity of one type."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Insert the entity when it has no id, otherwise update the matching record."""
        ...

    @abstractmethod
    def save_all(self, entities: Iterable[T]) -> list[T]:
        """Save each entity in turn."""
        ...

    @abstractmethod
    def delete(self, entity: T) -> None:
        """Remove an existing entity."""
        ...

    @abstractmethod
    def delete_by_id(self, identifier: Any) -> int:
        """Remove the entity with the given id; a missing id is not an error."""
        ...

    @abstractmethod
    def delete_all(self, entities: Iterable[T]) -> None:
        """Remove each of the given entities."""
        ...
