"""Tests for the ordinal lookup DAOs."""

from __future__ import annotations

import pytest

from tfi_dao.daos.book_status import BookStatusDao
from tfi_dao.enum_dao import EnumDao, OrdinalEnum, OrdinalOutOfRangeError
from tfi_dao.models.book import BookStatus


class Colour(OrdinalEnum):
    RED = "red"
    GREEN = "green"


@pytest.fixture
def dao() -> BookStatusDao:
    return BookStatusDao()


def test_members_expose_ordinal_id() -> None:
    assert [status.id for status in BookStatus] == [0, 1, 2]


def test_find_all_matches_get_all(dao: BookStatusDao) -> None:
    result = dao.find_all()

    assert result == list(dao.get_all())
    assert len(result) == 3


@pytest.mark.parametrize("identifier", [0, 1, 2])
def test_find_returns_member_at_position(dao: BookStatusDao, identifier: int) -> None:
    assert dao.find(identifier) is dao.get_all()[identifier]
    assert dao.find(identifier).id == identifier


@pytest.mark.parametrize("identifier", [3, 100, -1])
def test_find_out_of_range_raises(dao: BookStatusDao, identifier: int) -> None:
    with pytest.raises(OrdinalOutOfRangeError) as excinfo:
        dao.find(identifier)

    assert isinstance(excinfo.value, IndexError)
    assert excinfo.value.identifier == identifier
    assert excinfo.value.size == 3


def test_find_rejects_non_integer_ids(dao: BookStatusDao) -> None:
    with pytest.raises(TypeError):
        dao.find("1")


def test_for_enum_builds_dao() -> None:
    dao = EnumDao.for_enum(Colour)

    assert isinstance(dao, EnumDao)
    assert type(dao).__name__ == "ColourDao"
    assert dao.find_all() == [Colour.RED, Colour.GREEN]
    assert dao.find(1) is Colour.GREEN
    with pytest.raises(OrdinalOutOfRangeError):
        dao.find(2)


def test_subclass_with_plain_values() -> None:
    class Weekdays(EnumDao):
        def get_all(self):
            return ["mon", "tue", "wed"]

    dao = Weekdays()

    assert dao.find(2) == "wed"
    assert dao.find_all() == ["mon", "tue", "wed"]


@pytest.mark.parametrize("identifier", [True, False])
def test_find_rejects_bool_ids(dao: BookStatusDao, identifier: bool) -> None:
    with pytest.raises(TypeError):
        dao.find(identifier)
