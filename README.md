# libraryauto

Keep track of a small library: its members, its books and their stock,
who has borrowed what, and what was returned and whether a late fee is due.
Everything is kept in a single SQLite database file. The tables are created
automatically the first time the database is opened.

## Install

```
pip install .
```

The package needs nothing beyond the Python standard library (3.10 or later).

## Command line

The `libraryauto` command works on a database file, by default
`librarydatabase.db` in the current directory. Use `--database PATH` before
the section name to choose another file. For the full list of operations:

```
libraryauto --help
```

Members:

```
libraryauto member list
libraryauto member add Ada Lovelace
libraryauto member update 1 Ada King
libraryauto member delete 1
```

Books:

```
libraryauto book list
libraryauto book add Dune 3
libraryauto book update 1 Dune 5
libraryauto book delete 1
libraryauto book show 1        # open borrowings and returns of book 1
```

Borrowing and returning (`--date` takes `dd.mm.yyyy` and defaults to today):

```
libraryauto borrow new 1 1 --date 01.03.2024
libraryauto borrow list
libraryauto deliver new 1 1 --date 20.03.2024
libraryauto deliver list
```

Listings print one tab-separated record per line. `member add`, `book add`,
`borrow new` and `deliver new` print the record they created. When a rule
is broken, the command prints `error: ...` to standard error and exits with
status 1.

## Rules

- Members need both a name and a surname; books need a name and a stock
  count, which must be an integer.
- A new book may not have the same name as an existing one.
- A member or a book that still has an open borrowing cannot be deleted.
- A member cannot borrow the same book twice at once, and a book whose
  stock is zero cannot be borrowed. Borrowing takes one copy from stock;
  returning puts it back.
- A book can only be returned by the member who has borrowed it.
- Dates are stored as `dd.MM.yyyy` text, e.g. `05.03.2024`.
- A book may be kept for 15 days. Each day beyond that costs 4 units,
  recorded as the debt of the return.

## Using it from Python

```python
from datetime import date

from libraryauto.database import open_database, LibraryError
from libraryauto.members import MemberService
from libraryauto.books import BookService
from libraryauto.borrowing import BorrowService
from libraryauto.delivery import DeliveryService, compute_debt

connection = open_database("librarydatabase.db")

member = MemberService(connection).add("Ada", "Lovelace")
book = BookService(connection).add("Dune", 3)

BorrowService(connection).borrow(member.member_id, book.book_id, date(2024, 3, 1))
returned = DeliveryService(connection).deliver(
    member.member_id, book.book_id, date(2024, 3, 20)
)

print(returned.debt)                                        # 16
print(compute_debt(date(2024, 3, 1), date(2024, 3, 20)))    # 4 days late -> 16
```

Modules:

- `libraryauto.database`: `open_database`, `create_schema`, `format_date`,
  `parse_date` and the error classes.
- `libraryauto.members`: `Member` and `MemberService` (`list`, `add`,
  `update`, `delete`).
- `libraryauto.books`: `Book` and `BookService` (`list`, `add`, `update`,
  `delete`, `borrows_of`, `deliveries_of`).
- `libraryauto.borrowing`: `Borrowing` and `BorrowService` (`list`,
  `members`, `books`, `borrow`).
- `libraryauto.delivery`: `Delivery`, `DeliveryService` (`borrows`, `list`,
  `deliver`) and `compute_debt`.
- `libraryauto.cli`: `build_parser` and `main`.

Rule violations raise subclasses of `LibraryError`: `ValidationError` for
missing or malformed fields and dates, `DuplicateError` for a repeated book
name or borrowing, `NotFoundError` for an unknown book or a return of a book
that was not borrowed, `InUseError` when a delete is blocked by open
borrowings, and `OutOfStockError` when no copies are left.

## What it does not do

There is no graphical window; all work is done through the command line or
from Python. Updates and deletes of members and books do not check that the
given id exists, and renaming a book does not check that the new name is
unused.

## Tests

```
pip install .[test]
pytest
```