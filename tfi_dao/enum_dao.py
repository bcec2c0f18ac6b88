"""Read-only DAO over a fixed, ordered set of values."""

from __future__ import annotations

import enum
import operator
from abc import abstractmethod
from typing import Any, Sequence

from tfi_dao.interfaces import ReadOnlyDao, T


class OrdinalOutOfRangeError(IndexError):
    """Raised when an ordinal id does not name a member of the fixed set."""

    def __init__(self, identifier: Any, size: int) -> None:
        super().__init__(f"Ordinal id {identifier!r} is outside 0..{size - 1}")
        self.identifier = identifier
        self.size = size


class OrdinalEnum(enum.Enum):
    """Enum whose members are identified by their declaration position."""

    @property
    def id(self) -> int:
        return list(type(self)).index(self)


class EnumDao(ReadOnlyDao[T]):
    """DAO whose entities are a closed set known up front.

    The id of an entity is its zero-based position in :meth:`get_all`. Unlike
    store-backed DAOs, an unknown id is a programming error and raises
    :class:`OrdinalOutOfRangeError` instead of returning ``None``.
    """

    @abstractmethod
    def get_all(self) -> Sequence[T]:
        """Return every member of the set in ordinal order."""
        ...

    def find_all(self) -> list[T]:
        return list(self.get_all())

    def find(self, identifier: Any) -> T:
        if isinstance(identifier, bool):
            raise TypeError(f"Ordinal id must be an integer, got {identifier!r}")
        values = self.get_all()
        position = operator.index(identifier)
        # Negative ids would otherwise index from the end.
        if not 0 <= position < len(values):
            raise OrdinalOutOfRangeError(identifier, len(values))
        return values[position]

    @classmethod
    def for_enum(cls, enum_type: type[OrdinalEnum]) -> EnumDao:
        """Build a DAO over the members of ``enum_type``."""
        members = tuple(enum_type)

        class _MemberDao(cls):
            def get_all(self) -> Sequence[Any]:
                return members

        _MemberDao.__name__ = f"{enum_type.__name__}Dao"
        _MemberDao.__qualname__ = _MemberDao.__name__
        return _MemberDao()
