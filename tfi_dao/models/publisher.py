"""ORM model for publisher metadata."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tfi_dao.db.base import Base

if TYPE_CHECKING:
    from tfi_dao.models.book import Book


class Publisher(Base):
    """Represents a publisher owning a list of books."""

    __tablename__ = "publishers"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    display_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    # Loaded books are deleted with the publisher; unloaded rows are left to ON DELETE CASCADE
    books: Mapped[list["Book"]] = relationship(
        "Book", back_populates="publisher", cascade="all", passive_deletes=True
    )

    def __repr__(self) -> str:  # pragma: no cover - debug helper only
        return f"Publisher(id={self.id!r}, name={self.name!r})"
