"""Data access for publisher records."""

from __future__ import annotations

from tfi_dao.abstract_dao import AbstractDao
from tfi_dao.models.publisher import Publisher
from tfi_dao.store import Store


class PublisherDao(AbstractDao[Publisher]):
    """DAO for interacting with publisher records."""

    def __init__(self, store: Store) -> None:
        super().__init__(store, model=Publisher)

    def find_by_name(self, name: str) -> Publisher | None:
        """Fetch a publisher by unique name."""
        return self._unique(self._criteria().filter(Publisher.name == name))

    def list_paginated(self, skip: int = 0, limit: int = 100) -> list[Publisher]:
        criteria = self._criteria().order_by(Publisher.id).offset(skip).limit(limit)
        return self._list(criteria)

    def count(self) -> int:
        return self._aggregate(self._criteria().count())
