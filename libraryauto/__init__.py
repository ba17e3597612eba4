"""Library management: members, books, borrowing and returns with late fees, kept in SQLite."""

__version__ = "1.0.0"