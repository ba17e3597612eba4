"""Returning borrowed books and charging late fees."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from datetime import date

from .borrowing import Borrowing, BorrowService
from .database import NotFoundError, format_date, parse_date

LOAN_DAYS = 15
DAILY_FINE = 4


@dataclass(frozen=True)
class Delivery:
    """A returned loan with the fee charged for it."""

    member_id: int
    book_id: int
    borrow_date: date
    lend_date: date
    debt: int


def compute_debt(borrow_date: date, deliver_date: date) -> int:
    """Return the late fee for a loan returned on *deliver_date*."""
    delay = (deliver_date - borrow_date).days - LOAN_DAYS
    return DAILY_FINE * delay if delay > 0 else 0


class DeliveryService:
    """Operations that take back borrowed books."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection

    def borrows(self) -> list[Borrowing]:
        """Return the loans that are still open."""
        return BorrowService(self.connection).list()

    def list(self) -> list[Delivery]:
        """Return every returned loan in table order."""
        rows = self.connection.execute(
            "select memberID, bookID, borrowDate, lendDate, debt from delivers"
        )
        return [
            Delivery(member_id, book_id, parse_date(borrowed), parse_date(lent), debt)
            for member_id, book_id, borrowed, lent, debt in rows
        ]

    def deliver(self, member_id: int, book_id: int, on: date | None = None) -> Delivery:
        """Take back a book from a member on the given day (today by default).

        The loan is closed, the fee recorded and the copy put back in stock.
        """
        on = on or date.today()
        with self.connection:
            row = self.connection.execute(
                "select borrowDate from borrows where memberID=? and bookID=?",
                (member_id, book_id),
            ).fetchone()
            if row is None:
                raise NotFoundError("this member has not borrowed this book")
            borrowed = parse_date(row[0])
            debt = compute_debt(borrowed, on)
            self.connection.execute(
                "insert into delivers(memberID, bookID, borrowDate, lendDate, debt) "
                "values(?, ?, ?, ?, ?)",
                (member_id, book_id, format_date(borrowed), format_date(on), debt),
            )
            self.connection.execute(
                "delete from borrows where memberID=? and bookID=?",
                (member_id, book_id),
            )
            stock_row = self.connection.execute(
                "select bookOfNumber from books where bookID=?", (book_id,)
            ).fetchone()
            if stock_row is None:
                raise NotFoundError(f"no book with id {book_id}")
            self.connection.execute(
                "update books set bookOfNumber=? where bookID=?",
                (stock_row[0] + 1, book_id),
            )
        return Delivery(member_id, book_id, borrowed, on, debt)