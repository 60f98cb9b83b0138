"""SQLite storage for clients, books and loans."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from datetime import date
from typing import Any

from .models import Book, Client

DEFAULT_PATH = "library.db"

_SCHEMA = """
CREATE TABLE IF NOT EXISTS clients (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    first_name TEXT NOT NULL,
    last_name TEXT NOT NULL,
    birth_date TEXT NOT NULL,
    email TEXT NOT NULL,
    phone TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS books (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    author TEXT NOT NULL,
    publisher TEXT NOT NULL,
    publish_date TEXT NOT NULL,
    available BOOLEAN NOT NULL DEFAULT 1
);
CREATE TABLE IF NOT EXISTS loans (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    client_id INTEGER NOT NULL REFERENCES clients(id),
    book_id INTEGER NOT NULL REFERENCES books(id),
    loan_date TEXT NOT NULL,
    return_date TEXT NOT NULL,
    returned BOOLEAN NOT NULL DEFAULT 0
);
"""


class DatabaseError(Exception):
    """Raised when the database cannot be reached or a statement fails."""


def _book_from_row(row: sqlite3.Row) -> Book:
    return Book(
        id=row["id"],
        title=row["title"],
        author=row["author"],
        publisher=row["publisher"],
        publish_date=date.fromisoformat(row["publish_date"]),
        available=bool(row["available"]),
    )


def _client_from_row(row: sqlite3.Row) -> Client:
    return Client(
        id=row["id"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        birth_date=date.fromisoformat(row["birth_date"]),
        email=row["email"],
        phone=row["phone"],
    )


class Database:
    """A connection to the library database, opened lazily."""

    def __init__(self, path: str = DEFAULT_PATH) -> None:
        self.path = path
        self._conn: sqlite3.Connection | None = None

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def open(self) -> Database:
        """Open the connection if needed and make sure the schema exists."""
        if self._conn is not None:
            return self
        try:
            conn = sqlite3.connect(self.path)
            conn.row_factory = sqlite3.Row
            conn.execute("PRAGMA foreign_keys = ON")
            conn.executescript(_SCHEMA)
        except sqlite3.Error as exc:
            raise DatabaseError(f"cannot open database {self.path!r}: {exc}") from exc
        self._conn = conn
        return self

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> Database:
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise DatabaseError("connection is not open")
        return self._conn

    @contextmanager
    def _transaction(self) -> Iterator[sqlite3.Connection]:
        conn = self._connection()
        try:
            with conn:
                yield conn
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def query(self, sql: str, params: Sequence[Any] | dict[str, Any] = ()) -> list[sqlite3.Row]:
        """Run a SELECT and return all rows."""
        conn = self._connection()
        try:
            return conn.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def execute(self, sql: str, params: Sequence[Any] | dict[str, Any] = ()) -> int:
        """Run a modifying statement in its own transaction; return rows affected."""
        with self._transaction() as conn:
            return conn.execute(sql, params).rowcount

    def clients(self) -> list[Client]:
        return [_client_from_row(row) for row in self.query("SELECT * FROM clients ORDER BY id")]

    def books(self) -> list[Book]:
        return [_book_from_row(row) for row in self.query("SELECT * FROM books ORDER BY id")]

    def add_client(self, client: Client) -> int:
        """Store a client and return its new id."""
        with self._transaction() as conn:
            cursor = conn.execute(
                "INSERT INTO clients (first_name, last_name, birth_date, email, phone) "
                "VALUES (:first_name, :last_name, :birth_date, :email, :phone)",
                {
                    "first_name": client.first_name,
                    "last_name": client.last_name,
                    "birth_date": client.birth_date.isoformat(),
                    "email": client.email,
                    "phone": client.phone,
                },
            )
            return cursor.lastrowid

    def add_book(self, book: Book) -> int:
        """Store a book and return its new id."""
        with self._transaction() as conn:
            cursor = conn.execute(
                "INSERT INTO books (title, author, publisher, publish_date, available) "
                "VALUES (:title, :author, :publisher, :publish_date, :available)",
                {
                    "title": book.title,
                    "author": book.author,
                    "publisher": book.publisher,
                    "publish_date": book.publish_date.isoformat(),
                    "available": book.available,
                },
            )
            return cursor.lastrowid

    def add_loan(self, client_id: int, book_id: int, loan_date: date, return_date: date) -> int:
        """Record a loan, mark the book unavailable and return the loan id."""
        with self._transaction() as conn:
            cursor = conn.execute(
                "INSERT INTO loans (client_id, book_id, loan_date, return_date, returned) "
                "VALUES (?, ?, ?, ?, 0)",
                (client_id, book_id, loan_date.isoformat(), return_date.isoformat()),
            )
            conn.execute("UPDATE books SET available = 0 WHERE id = ?", (book_id,))
            return cursor.lastrowid

    def return_loan(self, loan_id: int) -> bool:
        """Close a loan today and free its book; return whether the loan existed."""
        with self._transaction() as conn:
            conn.execute(
                "UPDATE books SET available = 1 "
                "WHERE id = (SELECT book_id FROM loans WHERE id = ?)",
                (loan_id,),
            )
            cursor = conn.execute(
                "UPDATE loans SET returned = 1, return_date = ? WHERE id = ?",
                (date.today().isoformat(), loan_id),
            )
            return cursor.rowcount > 0

    def mark_book_available_by_loan_id(self, loan_id: int) -> None:
        """Mark the book of the given loan as available again."""
        self.execute(
            "UPDATE books SET available = 1 "
            "WHERE id = (SELECT book_id FROM loans WHERE id = ?)",
            (loan_id,),
        )