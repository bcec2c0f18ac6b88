"""Data access for books and their tags."""

from __future__ import annotations

from sqlalchemy import func

from tfi_dao.abstract_dao import AbstractDao
from tfi_dao.criteria import Criteria
from tfi_dao.models.book import Book, BookStatus, BookTag
from tfi_dao.store import Store


class BookDao(AbstractDao[Book]):
    """DAO for books; tags are handled as auxiliary rows."""

    def __init__(self, store: Store) -> None:
        super().__init__(store, model=Book)

    def _by_publisher(self, publisher_id: int) -> Criteria:
        return self._criteria().filter(Book.publisher_id == publisher_id)

    def list_by_publisher(self, publisher_id: int, *, include_archived: bool = False) -> list[Book]:
        """List books of a publisher ordered by name."""
        criteria = self._by_publisher(publisher_id)
        if not include_archived:
            criteria = criteria.filter(Book.status_id != BookStatus.ARCHIVED.id)
        return self._list(criteria.order_by(Book.book_name))

    def find_by_publisher_and_name(self, publisher_id: int, book_name: str) -> Book | None:
        criteria = self._by_publisher(publisher_id).filter(Book.book_name == book_name)
        return self._unique(criteria)

    def count_by_publisher(self, publisher_id: int) -> int:
        return self._aggregate(self._by_publisher(publisher_id).count())

    def total_pages(self, publisher_id: int) -> int:
        """Sum of page counts over a publisher's books; ``0`` when it has none."""
        return self._aggregate(self._by_publisher(publisher_id).aggregate(func.sum(Book.page_count)))

    def list_names(self, publisher_id: int) -> list[str]:
        return self._list(self._by_publisher(publisher_id).project(Book.book_name).order_by(Book.book_name))

    def delete_by_publisher(self, publisher_id: int) -> None:
        self._delete_where(self._by_publisher(publisher_id))

    def add_tag(self, book: Book, tag: str) -> BookTag:
        return self._save_object(BookTag(book_id=book.id, tag=tag))

    def remove_tag(self, book: Book, tag: str) -> None:
        criteria = Criteria(BookTag).filter(BookTag.book_id == book.id, BookTag.tag == tag)
        for row in self._list(criteria):
            self._delete_object(row)

    def list_tags(self, book: Book) -> list[str]:
        criteria = Criteria(BookTag).filter(BookTag.book_id == book.id).project(BookTag.tag)
        return self._list(criteria.order_by(BookTag.tag))
