"""Database connection, schema, shared errors and date helpers."""

from __future__ import annotations

import sqlite3
from datetime import date, datetime
from os import PathLike

DEFAULT_DATABASE = "librarydatabase.db"
DATE_FORMAT = "%d.%m.%Y"

_SCHEMA = """
create table if not exists members (
    memberID integer primary key autoincrement,
    memberName text not null,
    memberSurname text not null
);
create table if not exists books (
    bookID integer primary key autoincrement,
    bookName text not null,
    bookOfNumber integer not null default 0
);
create table if not exists borrows (
    memberID integer not null,
    bookID integer not null,
    borrowDate text not null
);
create table if not exists delivers (
    memberID integer not null,
    bookID integer not null,
    borrowDate text not null,
    lendDate text not null,
    debt integer not null default 0
);
"""


class LibraryError(Exception):
    """Base class for errors raised by library operations."""


class ValidationError(LibraryError, ValueError):
    """Required input is missing or malformed."""


class DuplicateError(LibraryError):
    """A record with the same identifying value already exists."""


class NotFoundError(LibraryError, LookupError):
    """A referenced record does not exist."""


class InUseError(LibraryError):
    """A record cannot be removed while other records refer to it."""


class OutOfStockError(LibraryError):
    """No copies of the requested book are available."""


def create_schema(connection: sqlite3.Connection) -> None:
    """Create the library tables if they do not exist yet."""
    with connection:
        connection.executescript(_SCHEMA)


def open_database(path: str | PathLike[str] = DEFAULT_DATABASE) -> sqlite3.Connection:
    """Open (or create) the library database at *path* and ensure its schema."""
    try:
        connection = sqlite3.connect(path)
    except sqlite3.Error as exc:
        raise LibraryError(f"cannot open database {path!s}: {exc}") from exc
    create_schema(connection)
    return connection


def format_date(value: date) -> str:
    """Render a date in the stored ``dd.MM.yyyy`` form."""
    return value.strftime(DATE_FORMAT)


def parse_date(text: str) -> date:
    """Parse a ``dd.MM.yyyy`` string into a date."""
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"invalid date: {text!r}") from exc