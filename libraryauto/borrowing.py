"""Lending books to members."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from datetime import date

from .books import Book, BookService
from .database import (
    DuplicateError,
    NotFoundError,
    OutOfStockError,
    format_date,
    parse_date,
)
from .members import Member, MemberService


@dataclass(frozen=True)
class Borrowing:
    """A book currently on loan to a member."""

    member_id: int
    book_id: int
    borrow_date: date


class BorrowService:
    """Operations that lend books and list open loans."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection

    def list(self) -> list[Borrowing]:
        """Return every open loan in table order."""
        rows = self.connection.execute(
            "select memberID, bookID, borrowDate from borrows"
        )
        return [
            Borrowing(member_id, book_id, parse_date(borrowed))
            for member_id, book_id, borrowed in rows
        ]

    def members(self) -> list[Member]:
        """Return the members that can borrow books."""
        return MemberService(self.connection).list()

    def books(self) -> list[Book]:
        """Return the books that can be borrowed."""
        return BookService(self.connection).list()

    def borrow(self, member_id: int, book_id: int, on: date | None = None) -> Borrowing:
        """Lend one copy of a book to a member on the given day (today by default).

        A member may hold only one copy of a title, and the book must be in stock.
        """
        on = on or date.today()
        with self.connection:
            already = self.connection.execute(
                "select count(*) from borrows where memberID=? and bookID=?",
                (member_id, book_id),
            ).fetchone()[0]
            if already > 0:
                raise DuplicateError("this member has already borrowed this book")
            row = self.connection.execute(
                "select bookOfNumber from books where bookID=?", (book_id,)
            ).fetchone()
            if row is None:
                raise NotFoundError(f"no book with id {book_id}")
            stock = row[0]
            if stock <= 0:
                raise OutOfStockError("the selected book is out of stock")
            self.connection.execute(
                "update books set bookOfNumber=? where bookID=?",
                (stock - 1, book_id),
            )
            self.connection.execute(
                "insert into borrows(memberID, bookID, borrowDate) values(?, ?, ?)",
                (member_id, book_id, format_date(on)),
            )
        return Borrowing(member_id, book_id, on)