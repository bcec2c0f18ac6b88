"""Tests for the book and material DAOs against SQLite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from tfi_dao.daos import BookDao, BookStatusDao, MaterialDao, PublisherDao
from tfi_dao.db.base import Base
from tfi_dao.models import Book, BookStatus, BookTag, Material, Publisher
from tfi_dao.store import SessionStore


@pytest.fixture()
def session() -> Iterator[Session]:
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session_local = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    with session_local() as session:
        yield session


@pytest.fixture()
def store(session: Session) -> SessionStore:
    return SessionStore(session)


@pytest.fixture()
def publisher(store: SessionStore) -> Publisher:
    return PublisherDao(store).save(Publisher(name="Dream Press"))


@pytest.fixture()
def book_dao(store: SessionStore) -> BookDao:
    return BookDao(store)


def _book(publisher: Publisher, name: str, pages: int = 0, status: BookStatus = BookStatus.DRAFT) -> Book:
    return Book(publisher_id=publisher.id, book_name=name, page_count=pages, status_id=status.id)


def test_list_by_publisher_hides_archived(book_dao: BookDao, publisher: Publisher) -> None:
    book_dao.save_all(
        [
            _book(publisher, "Zebra", status=BookStatus.PUBLISHED),
            _book(publisher, "Atlas"),
            _book(publisher, "Old", status=BookStatus.ARCHIVED),
        ]
    )

    assert [b.book_name for b in book_dao.list_by_publisher(publisher.id)] == ["Atlas", "Zebra"]
    assert len(book_dao.list_by_publisher(publisher.id, include_archived=True)) == 3


def test_find_by_publisher_and_name(book_dao: BookDao, publisher: Publisher) -> None:
    book_dao.save_all([_book(publisher, "Atlas"), _book(publisher, "Twin"), _book(publisher, "Twin")])

    assert book_dao.find_by_publisher_and_name(publisher.id, "Atlas").book_name == "Atlas"
    assert book_dao.find_by_publisher_and_name(publisher.id, "Missing") is None
    # Two matches are not a unique result.
    assert book_dao.find_by_publisher_and_name(publisher.id, "Twin") is None


def test_aggregates(book_dao: BookDao, publisher: Publisher) -> None:
    assert book_dao.count_by_publisher(publisher.id) == 0
    assert book_dao.total_pages(publisher.id) == 0

    book_dao.save_all([_book(publisher, "A", pages=120), _book(publisher, "B", pages=80)])

    assert book_dao.count_by_publisher(publisher.id) == 2
    assert book_dao.total_pages(publisher.id) == 200


def test_list_names_projects_single_column(book_dao: BookDao, publisher: Publisher) -> None:
    book_dao.save_all([_book(publisher, "B"), _book(publisher, "A")])

    assert book_dao.list_names(publisher.id) == ["A", "B"]


def test_delete_by_publisher(book_dao: BookDao, store: SessionStore, publisher: Publisher) -> None:
    other = PublisherDao(store).save(Publisher(name="Nightfall"))
    book_dao.save_all([_book(publisher, "A"), _book(publisher, "B"), _book(other, "C")])

    book_dao.delete_by_publisher(publisher.id)

    assert [b.book_name for b in book_dao.find_all()] == ["C"]


def test_tags_are_saved_without_duplicates(book_dao: BookDao, store: SessionStore, publisher: Publisher) -> None:
    book = book_dao.save(_book(publisher, "Atlas"))

    book_dao.add_tag(book, "maps")
    book_dao.add_tag(book, "geography")
    book_dao.add_tag(book, "maps")

    assert book_dao.list_tags(book) == ["geography", "maps"]
    assert len(store.load_all(BookTag)) == 2

    book_dao.remove_tag(book, "maps")
    book_dao.remove_tag(book, "unknown")

    assert book_dao.list_tags(book) == ["geography"]


def test_status_lookup_for_book(book_dao: BookDao, publisher: Publisher) -> None:
    book = book_dao.save(_book(publisher, "Atlas", status=BookStatus.PUBLISHED))

    assert BookStatusDao().find(book.status_id) is BookStatus.PUBLISHED


def test_material_uuid_ids_delete_by_reference(store: SessionStore) -> None:
    dao = MaterialDao(store)
    material = dao.save(Material(filename="notes.pdf", content_type="application/pdf", size=10))

    assert isinstance(material.id, str)
    assert dao.find(material.id) is material

    dao.delete(material)

    assert dao.find_all() == []


def test_material_lookup_by_book(store: SessionStore, book_dao: BookDao, publisher: Publisher) -> None:
    book = book_dao.save(_book(publisher, "Atlas"))
    dao = MaterialDao(store)
    dao.save_all(
        [
            Material(book_id=book.id, filename="b.mp3", content_type="audio/mpeg"),
            Material(book_id=book.id, filename="a.pdf", content_type="application/pdf"),
        ]
    )

    assert [m.filename for m in dao.list_by_book(book.id)] == ["a.pdf", "b.mp3"]
    assert dao.find_by_filename(book.id, "a.pdf").content_type == "application/pdf"
    assert dao.find_by_filename(book.id, "c.txt") is None


def test_delete_all_publishers_with_loaded_books(
    book_dao: BookDao, store: SessionStore, session: Session, publisher: Publisher
) -> None:
    book_dao.save(_book(publisher, "Atlas"))
    session.expire(publisher)
    assert [b.book_name for b in publisher.books] == ["Atlas"]

    PublisherDao(store).delete_all([publisher])

    assert PublisherDao(store).find_all() == []
    assert book_dao.find_all() == []
