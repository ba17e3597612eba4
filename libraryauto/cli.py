"""Command-line front end for the library."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from collections.abc import Callable, Sequence
from datetime import date

from .books import BookService
from .borrowing import Borrowing, BorrowService
from .database import (
    DEFAULT_DATABASE,
    LibraryError,
    ValidationError,
    format_date,
    open_database,
    parse_date,
)
from .delivery import Delivery, DeliveryService
from .members import MemberService


def _date_arg(text: str) -> date:
    try:
        return parse_date(text)
    except ValidationError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the library commands."""
    parser = argparse.ArgumentParser(
        prog="libraryauto",
        description="Library automation: members, books, loans and returns.",
    )
    parser.add_argument(
        "--database", default=DEFAULT_DATABASE, help="path of the SQLite database"
    )
    sections = parser.add_subparsers(dest="section", required=True)

    member = sections.add_parser("member", help="member operations")
    member_actions = member.add_subparsers(dest="action", required=True)
    member_actions.add_parser("list", help="list members")
    add = member_actions.add_parser("add", help="register a member")
    add.add_argument("name")
    add.add_argument("surname")
    update = member_actions.add_parser("update", help="rename a member")
    update.add_argument("member_id", type=int)
    update.add_argument("name")
    update.add_argument("surname")
    delete = member_actions.add_parser("delete", help="remove a member")
    delete.add_argument("member_id", type=int)

    book = sections.add_parser("book", help="book operations")
    book_actions = book.add_subparsers(dest="action", required=True)
    book_actions.add_parser("list", help="list books")
    add = book_actions.add_parser("add", help="add a book")
    add.add_argument("name")
    add.add_argument("stock")
    update = book_actions.add_parser("update", help="change a book")
    update.add_argument("book_id", type=int)
    update.add_argument("name")
    update.add_argument("stock")
    delete = book_actions.add_parser("delete", help="remove a book")
    delete.add_argument("book_id", type=int)
    show = book_actions.add_parser("show", help="show loans and returns of a book")
    show.add_argument("book_id", type=int)

    for name, verb in (("borrow", "lend a book"), ("deliver", "take back a book")):
        section = sections.add_parser(name, help=f"{verb}")
        actions = section.add_subparsers(dest="action", required=True)
        actions.add_parser("list", help="list records")
        new = actions.add_parser("new", help=verb)
        new.add_argument("member_id", type=int)
        new.add_argument("book_id", type=int)
        new.add_argument(
            "--date", type=_date_arg, default=None, help="day as dd.mm.yyyy"
        )
    return parser


def _borrowing_line(item: Borrowing) -> str:
    return f"{item.member_id}\t{item.book_id}\t{format_date(item.borrow_date)}"


def _delivery_line(item: Delivery) -> str:
    return (
        f"{item.member_id}\t{item.book_id}\t{format_date(item.borrow_date)}"
        f"\t{format_date(item.lend_date)}\t{item.debt}"
    )


def _member_list(conn: sqlite3.Connection, args: argparse.Namespace) -> None:
    for m in MemberService(conn).list():
        print(f"{m.member_id}\t{m.name}\t{m.surname}")


def _member_add(conn: sqlite3.Connection, args: argparse.Namespace) -> None:
    m = MemberService(conn).add(args.name, args.surname)
    print(f"{m.member_id}\t{m.name}\t{m.surname}")


def _member_update(conn: sqlite3.Connection, args: argparse.Namespace) -> None:
    MemberService(conn).update(args.member_id, args.name, args.surname)


def _member_delete(conn: sqlite3.Connection, args: argparse.Namespace) -> None:
    MemberService(conn).delete(args.member_id)


def _book_list(conn: sqlite3.Connection, args: argparse.Namespace) -> None:
    for b in BookService(conn).list():
        print(f"{b.book_id}\t{b.name}\t{b.stock}")


def _book_add(conn: sqlite3.Connection, args: argparse.Namespace) -> None:
    b = BookService(conn).add(args.name, args.stock)
    print(f"{b.book_id}\t{b.name}\t{b.stock}")


def _book_update(conn: sqlite3.Connection, args: argparse.Namespace) -> None:
    BookService(conn).update(args.book_id, args.name, args.stock)


def _book_delete(conn: sqlite3.Connection, args: argparse.Namespace) -> None:
    BookService(conn).delete(args.book_id)


def _book_show(conn: sqlite3.Connection, args: argparse.Namespace) -> None:
    service = BookService(conn)
    print("borrows:")
    for row in service.borrows_of(args.book_id):
        print("\t".join(str(value) for value in row))
    print("deliveries:")
    for row in service.deliveries_of(args.book_id):
        print("\t".join(str(value) for value in row))


def _borrow_list(conn: sqlite3.Connection, args: argparse.Namespace) -> None:
    for item in BorrowService(conn).list():
        print(_borrowing_line(item))


def _borrow_new(conn: sqlite3.Connection, args: argparse.Namespace) -> None:
    print(_borrowing_line(BorrowService(conn).borrow(args.member_id, args.book_id, args.date)))


def _deliver_list(conn: sqlite3.Connection, args: argparse.Namespace) -> None:
    for item in DeliveryService(conn).list():
        print(_delivery_line(item))


def _deliver_new(conn: sqlite3.Connection, args: argparse.Namespace) -> None:
    print(_delivery_line(DeliveryService(conn).deliver(args.member_id, args.book_id, args.date)))


_HANDLERS: dict[tuple[str, str], Callable[[sqlite3.Connection, argparse.Namespace], None]] = {
    ("member", "list"): _member_list,
    ("member", "add"): _member_add,
    ("member", "update"): _member_update,
    ("member", "delete"): _member_delete,
    ("book", "list"): _book_list,
    ("book", "add"): _book_add,
    ("book", "update"): _book_update,
    ("book", "delete"): _book_delete,
    ("book", "show"): _book_show,
    ("borrow", "list"): _borrow_list,
    ("borrow", "new"): _borrow_new,
    ("deliver", "list"): _deliver_list,
    ("deliver", "new"): _deliver_new,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one library command; return the process exit status."""
    args = build_parser().parse_args(argv)
    try:
        connection = open_database(args.database)
    except LibraryError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    try:
        _HANDLERS[(args.section, args.action)](connection, args)
    except LibraryError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    finally:
        connection.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())