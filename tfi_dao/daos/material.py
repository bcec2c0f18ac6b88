"""Data access for book materials."""

from __future__ import annotations

from tfi_dao.abstract_dao import AbstractDao
from tfi_dao.models.material import Material
from tfi_dao.store import Store


class MaterialDao(AbstractDao[Material]):
    """Materials use UUID string ids, so ``delete`` removes them by reference."""

    def __init__(self, store: Store) -> None:
        super().__init__(store, model=Material)

    def find_by_filename(self, book_id: int, filename: str) -> Material | None:
        criteria = self._criteria().filter(
            Material.book_id == book_id,
            Material.filename == filename,
        )
        return self._unique(criteria)

    def list_by_book(self, book_id: int) -> list[Material]:
        return self._list(self._criteria().filter(Material.book_id == book_id).order_by(Material.filename))
