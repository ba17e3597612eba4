"""Book records: stock management and loan history per book."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass

from .database import DuplicateError, InUseError, ValidationError


@dataclass(frozen=True)
class Book:
    """A book title and the number of copies on the shelf."""

    book_id: int
    name: str
    stock: int


def _require_name(name: str) -> None:
    if not name:
        raise ValidationError("book name is required")


def _parse_stock(stock: int | str | None) -> int:
    if stock is None or (isinstance(stock, str) and not stock.strip()):
        raise ValidationError("stock is required")
    try:
        return int(stock)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"invalid stock: {stock!r}") from exc


class BookService:
    """Operations on the books table."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection

    def list(self) -> list[Book]:
        """Return every book in table order."""
        rows = self.connection.execute(
            "select bookID, bookName, bookOfNumber from books"
        )
        return [Book(*row) for row in rows]

    def add(self, name: str, stock: int | str) -> Book:
        """Add a new title; names must be unique."""
        _require_name(name)
        count = _parse_stock(stock)
        existing = self.connection.execute(
            "select count(*) from books where bookName=?", (name,)
        ).fetchone()[0]
        if existing > 0:
            raise DuplicateError(f"a book named {name!r} already exists")
        with self.connection:
            cursor = self.connection.execute(
                "insert into books(bookName, bookOfNumber) values(?, ?)",
                (name, count),
            )
        return Book(cursor.lastrowid, name, count)

    def update(self, book_id: int, name: str, stock: int | str) -> None:
        """Change the name and stock of a book."""
        _require_name(name)
        count = _parse_stock(stock)
        with self.connection:
            self.connection.execute(
                "update books set bookName=?, bookOfNumber=? where bookID=?",
                (name, count, book_id),
            )

    def delete(self, book_id: int) -> None:
        """Remove a book that is not currently on loan."""
        on_loan = self.connection.execute(
            "select count(*) from borrows where bookID=?", (book_id,)
        ).fetchone()[0]
        if on_loan > 0:
            raise InUseError("a book cannot be removed while copies are on loan")
        with self.connection:
            self.connection.execute("delete from books where bookID=?", (book_id,))

    def borrows_of(self, book_id: int) -> list[tuple[int, int, str]]:
        """Return open loans of a book as (member_id, book_id, borrow_date) rows."""
        return self.connection.execute(
            "select memberID, bookID, borrowDate from borrows where bookID=?",
            (book_id,),
        ).fetchall()

    def deliveries_of(self, book_id: int) -> list[tuple[int, int, str, str, int]]:
        """Return returned loans of a book as
        (member_id, book_id, borrow_date, lend_date, debt) rows."""
        return self.connection.execute(
            "select memberID, bookID, borrowDate, lendDate, debt "
            "from delivers where bookID=?",
            (book_id,),
        ).fetchall()