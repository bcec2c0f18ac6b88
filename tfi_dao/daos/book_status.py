"""Fixed lookup of book lifecycle states."""

from __future__ import annotations

from typing import Sequence

from tfi_dao.enum_dao import EnumDao
from tfi_dao.models.book import BookStatus


class BookStatusDao(EnumDao[BookStatus]):
    """Resolves ``books.status_id`` values to :class:`BookStatus` members."""

    def get_all(self) -> Sequence[BookStatus]:
        return tuple(BookStatus)
