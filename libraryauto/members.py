"""Member records: listing, adding, updating and removing."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass

from .database import InUseError, ValidationError


@dataclass(frozen=True)
class Member:
    """A library member."""

    member_id: int
    name: str
    surname: str


def _require_names(name: str, surname: str) -> None:
    if not name or not surname:
        raise ValidationError("member name and surname are required")


class MemberService:
    """Operations on the members table."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection

    def list(self) -> list[Member]:
        """Return every member in table order."""
        rows = self.connection.execute(
            "select memberID, memberName, memberSurname from members"
        )
        return [Member(*row) for row in rows]

    def add(self, name: str, surname: str) -> Member:
        """Register a new member and return it."""
        _require_names(name, surname)
        with self.connection:
            cursor = self.connection.execute(
                "insert into members(memberName, memberSurname) values(?, ?)",
                (name, surname),
            )
        return Member(cursor.lastrowid, name, surname)

    def update(self, member_id: int, name: str, surname: str) -> None:
        """Change the name and surname of a member."""
        _require_names(name, surname)
        with self.connection:
            self.connection.execute(
                "update members set memberName=?, memberSurname=? where memberID=?",
                (name, surname, member_id),
            )

    def delete(self, member_id: int) -> None:
        """Remove a member who has no books on loan."""
        on_loan = self.connection.execute(
            "select count(*) from borrows where memberID=?", (member_id,)
        ).fetchone()[0]
        if on_loan > 0:
            raise InUseError(
                "a member cannot be removed while they have borrowed books"
            )
        with self.connection:
            self.connection.execute(
                "delete from members where memberID=?", (member_id,)
            )