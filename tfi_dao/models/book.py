"""ORM models for books and their free-form tags."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tfi_dao.db.base import Base
from tfi_dao.enum_dao import OrdinalEnum

if TYPE_CHECKING:
    from tfi_dao.models.publisher import Publisher


class BookStatus(OrdinalEnum):
    """Lifecycle states for books, stored by ordinal in ``books.status_id``."""

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class Book(Base):
    """Represents a book belonging to a publisher."""

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    publisher_id: Mapped[int] = mapped_column(
        ForeignKey("publishers.id", ondelete="CASCADE"), nullable=False, index=True
    )
    book_name: Mapped[str] = mapped_column(String(255), nullable=False)
    page_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    status_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")

    publisher: Mapped["Publisher"] = relationship("Publisher", back_populates="books")

    def __repr__(self) -> str:  # pragma: no cover - debug helper only
        return f"Book(id={self.id!r}, book_name={self.book_name!r})"


class BookTag(Base):
    """Association row attaching a tag to a book; it has no ``id`` of its own."""

    __tablename__ = "book_tags"

    book_id: Mapped[int] = mapped_column(
        ForeignKey("books.id", ondelete="CASCADE"), primary_key=True
    )
    tag: Mapped[str] = mapped_column(String(64), primary_key=True)
