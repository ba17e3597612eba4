import pytest

from libraryauto.books import Book, BookService
from libraryauto.database import (
    DuplicateError,
    InUseError,
    ValidationError,
    open_database,
)


@pytest.fixture
def connection():
    conn = open_database(":memory:")
    yield conn
    conn.close()


@pytest.fixture
def service(connection):
    return BookService(connection)


def test_add_then_list(service):
    added = service.add("Dune", 4)
    assert service.list() == [added]
    assert added.stock == 4


def test_add_accepts_numeric_text(service):
    added = service.add("Dune", "7")
    assert service.list() == [Book(added.book_id, "Dune", 7)]


def test_add_rejects_duplicate_name(service):
    service.add("Dune", 1)
    with pytest.raises(DuplicateError):
        service.add("Dune", 2)
    assert len(service.list()) == 1


@pytest.mark.parametrize("name,stock", [("", 3), ("Dune", ""), ("Dune", None)])
def test_add_requires_fields(service, name, stock):
    with pytest.raises(ValidationError):
        service.add(name, stock)
    assert service.list() == []


def test_add_rejects_non_numeric_stock(service):
    with pytest.raises(ValidationError):
        service.add("Dune", "many")


def test_update_changes_book(service):
    added = service.add("Dune", 1)
    service.update(added.book_id, "Dune Messiah", 5)
    assert service.list() == [Book(added.book_id, "Dune Messiah", 5)]


def test_update_requires_fields(service):
    added = service.add("Dune", 1)
    with pytest.raises(ValidationError):
        service.update(added.book_id, "", 2)
    assert service.list() == [added]


def test_delete_removes_book(service):
    first = service.add("Dune", 1)
    second = service.add("Emma", 2)
    service.delete(first.book_id)
    assert service.list() == [second]


def test_delete_refuses_book_on_loan(service, connection):
    added = service.add("Dune", 1)
    with connection:
        connection.execute(
            "insert into borrows(memberID, bookID, borrowDate) values(?, ?, ?)",
            (1, added.book_id, "01.01.2024"),
        )
    with pytest.raises(InUseError):
        service.delete(added.book_id)
    assert service.list() == [added]


def test_borrows_of_filters_by_book(service, connection):
    dune = service.add("Dune", 1)
    emma = service.add("Emma", 1)
    with connection:
        connection.executemany(
            "insert into borrows(memberID, bookID, borrowDate) values(?, ?, ?)",
            [(1, dune.book_id, "01.01.2024"), (2, emma.book_id, "02.01.2024")],
        )
    assert service.borrows_of(dune.book_id) == [(1, dune.book_id, "01.01.2024")]
    assert service.borrows_of(999) == []


def test_deliveries_of_filters_by_book(service, connection):
    dune = service.add("Dune", 1)
    emma = service.add("Emma", 1)
    with connection:
        connection.executemany(
            "insert into delivers(memberID, bookID, borrowDate, lendDate, debt) "
            "values(?, ?, ?, ?, ?)",
            [
                (1, dune.book_id, "01.01.2024", "10.01.2024", 0),
                (2, emma.book_id, "01.01.2024", "30.01.2024", 8),
            ],
        )
    assert service.deliveries_of(emma.book_id) == [
        (2, emma.book_id, "01.01.2024", "30.01.2024", 8)
    ]
    assert service.deliveries_of(999) == []