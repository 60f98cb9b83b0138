"""Lending books to clients and taking them back."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta

from .clients import ClientRegistry
from .database import Database
from .models import Book, Client, ValidationError


def default_dates(today: date) -> tuple[date, date]:
    """Return the loan date and planned return date offered for a new loan."""
    return today, today + timedelta(days=1)


@dataclass(frozen=True)
class OpenLoan:
    """A loan that has not been returned yet, with its book's title."""

    loan_id: int
    title: str


class LoanDesk:
    """Records loans and returns against a library database."""

    def __init__(self, database: Database) -> None:
        self._database = database

    def search_clients(self, text: str = "") -> list[Client]:
        """Return clients whose first or last name contains ``text``, ignoring case."""
        return ClientRegistry(self._database).search(text)

    def available_books(self) -> list[Book]:
        """Return the books that can be lent right now."""
        return [book for book in self._database.books() if book.available]

    def lend(
        self,
        client_id: int | None,
        book_id: int | None,
        loan_date: date,
        return_date: date,
    ) -> int:
        """Lend a book to a client; return the new loan's id."""
        if client_id is None:
            raise ValidationError("Nie wybrano klienta.")
        if book_id is None:
            raise ValidationError("Nie można pobrać książek.")
        if return_date <= loan_date:
            raise ValidationError(
                "Data zwrotu musi być późniejsza niż data wypożyczenia."
            )
        return self._database.add_loan(client_id, book_id, loan_date, return_date)

    def open_loans(self, client_id: int) -> list[OpenLoan]:
        """Return the client's loans that are still out."""
        rows = self._database.query(
            "SELECT loans.id AS loan_id, books.title AS title FROM loans "
            "JOIN books ON loans.book_id = books.id "
            "WHERE loans.client_id = ? AND loans.returned = 0 ORDER BY loans.id",
            (client_id,),
        )
        return [OpenLoan(loan_id=row["loan_id"], title=row["title"]) for row in rows]

    def return_loans(self, loan_ids: Iterable[int], today: date | None = None) -> list[int]:
        """Close the given loans on ``today`` and free their books.

        Returns the ids of the loans that were actually closed.
        """
        day = (today or date.today()).isoformat()
        returned = []
        for loan_id in loan_ids:
            changed = self._database.execute(
                "UPDATE loans SET returned = 1, return_date = ? WHERE id = ?",
                (day, loan_id),
            )
            if changed:
                self._database.mark_book_available_by_loan_id(loan_id)
                returned.append(loan_id)
        return returned