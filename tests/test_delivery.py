from datetime import date, timedelta

import pytest

from libraryauto.books import BookService
from libraryauto.borrowing import BorrowService
from libraryauto.database import NotFoundError, open_database
from libraryauto.delivery import (
    DAILY_FINE,
    LOAN_DAYS,
    Delivery,
    DeliveryService,
    compute_debt,
)
from libraryauto.members import MemberService

START = date(2024, 1, 1)


@pytest.fixture
def connection():
    conn = open_database(":memory:")
    yield conn
    conn.close()


@pytest.fixture
def loan(connection):
    member = MemberService(connection).add("Ada", "Lovelace")
    book = BookService(connection).add("Dune", 3)
    BorrowService(connection).borrow(member.member_id, book.book_id, START)
    return member, book


def test_no_debt_within_loan_period():
    assert compute_debt(START, START) == 0
    assert compute_debt(START, START + timedelta(days=LOAN_DAYS)) == 0


def test_one_day_late_costs_daily_fine():
    assert compute_debt(START, START + timedelta(days=LOAN_DAYS + 1)) == DAILY_FINE


def test_worked_example_ten_days_late():
    assert compute_debt(date(2024, 1, 1), date(2024, 1, 26)) == 40


def test_debt_never_negative_and_grows_with_delay():
    debts = [compute_debt(START, START + timedelta(days=d)) for d in range(40)]
    assert min(debts) == 0
    assert debts == sorted(debts)


def test_deliver_closes_loan_and_restores_stock(connection, loan):
    member, book = loan
    service = DeliveryService(connection)
    returned_on = START + timedelta(days=3)
    result = service.deliver(member.member_id, book.book_id, returned_on)
    assert result == Delivery(member.member_id, book.book_id, START, returned_on, 0)
    assert service.borrows() == []
    assert service.list() == [result]
    assert BookService(connection).list()[0].stock == book.stock


def test_late_delivery_records_debt(connection, loan):
    member, book = loan
    service = DeliveryService(connection)
    returned_on = START + timedelta(days=LOAN_DAYS + 5)
    result = service.deliver(member.member_id, book.book_id, returned_on)
    assert result.debt == compute_debt(START, returned_on)
    assert result.debt > 0
    assert BookService(connection).deliveries_of(book.book_id) == [
        (member.member_id, book.book_id, "01.01.2024", "21.01.2024", result.debt)
    ]


def test_deliver_without_loan_raises(connection, loan):
    member, book = loan
    service = DeliveryService(connection)
    with pytest.raises(NotFoundError):
        service.deliver(member.member_id, book.book_id + 100, START)
    assert service.list() == []
    assert len(service.borrows()) == 1


def test_missing_book_rolls_back(connection, loan):
    member, _ = loan
    with connection:
        connection.execute(
            "insert into borrows(memberID, bookID, borrowDate) values(?, ?, ?)",
            (member.member_id, 99, "01.01.2024"),
        )
    service = DeliveryService(connection)
    with pytest.raises(NotFoundError):
        service.deliver(member.member_id, 99, START)
    assert service.list() == []
    assert len(service.borrows()) == 2


def test_only_returned_book_is_closed(connection, loan):
    member, book = loan
    other = BookService(connection).add("Emma", 1)
    BorrowService(connection).borrow(member.member_id, other.book_id, START)
    service = DeliveryService(connection)
    service.deliver(member.member_id, book.book_id, START)
    assert [b.book_id for b in service.borrows()] == [other.book_id]