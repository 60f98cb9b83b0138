"""Client registry operations: adding, searching, deleting and loan history."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date

from .database import Database
from .models import Client, ValidationError

_EMAIL_PATTERN = re.compile(r"\S+@\S+")


def is_valid_email(email: str) -> bool:
    """Return whether the address has the form ``something@something``."""
    return _EMAIL_PATTERN.fullmatch(email) is not None


def history_title(first_name: str, last_name: str) -> str:
    """Return the heading shown above a client's loan history."""
    return f"Historia wypożyczeń: {first_name} {last_name}"


@dataclass(frozen=True)
class HistoryEntry:
    """One loan in a client's history."""

    title: str
    loan_date: date
    return_date: date
    returned: bool


class ClientRegistry:
    """Manages the clients stored in a library database."""

    def __init__(self, database: Database) -> None:
        self._database = database

    def add(
        self,
        first_name: str,
        last_name: str,
        birth_date: date,
        email: str,
        phone: str,
    ) -> int:
        """Validate and store a new client; return its id."""
        first_name, last_name = first_name.strip(), last_name.strip()
        email, phone = email.strip(), phone.strip()
        if not (first_name and last_name and email and phone):
            raise ValidationError("Wszystkie pola muszą być wypełnione.")
        if not is_valid_email(email):
            raise ValidationError("Niepoprawny adres e-mail.")

        self._database.open()
        rows = self._database.query("SELECT COUNT(*) FROM clients WHERE email = ?", (email,))
        if rows[0][0] > 0:
            raise ValidationError("Podany adres e-mail już istnieje w bazie.")

        client = Client(
            first_name=first_name,
            last_name=last_name,
            birth_date=birth_date,
            email=email,
            phone=phone,
        )
        return self._database.add_client(client)

    def search(self, text: str = "") -> list[Client]:
        """Return clients whose first or last name contains ``text``, ignoring case."""
        clients = self._database.clients()
        if not text:
            return clients
        needle = text.casefold()
        return [
            client
            for client in clients
            if needle in client.first_name.casefold() or needle in client.last_name.casefold()
        ]

    def delete(self, client_id: int) -> bool:
        """Delete a client and their loan history; return whether a client was removed.

        A client with loans not yet returned cannot be deleted.
        """
        rows = self._database.query(
            "SELECT COUNT(*) FROM loans WHERE client_id = ? AND returned = 0", (client_id,)
        )
        if rows[0][0] > 0:
            raise ValidationError("Klient ma aktywne wypożyczenia.")
        self._database.execute("DELETE FROM loans WHERE client_id = ?", (client_id,))
        return self._database.execute("DELETE FROM clients WHERE id = ?", (client_id,)) > 0

    def history(self, client_id: int) -> list[HistoryEntry]:
        """Return every loan of the client with the borrowed book's title."""
        rows = self._database.query(
            "SELECT books.title AS title, loans.loan_date AS loan_date, "
            "loans.return_date AS return_date, loans.returned AS returned "
            "FROM loans JOIN books ON loans.book_id = books.id "
            "WHERE loans.client_id = ? ORDER BY loans.id",
            (client_id,),
        )
        return [
            HistoryEntry(
                title=row["title"],
                loan_date=date.fromisoformat(row["loan_date"]),
                return_date=date.fromisoformat(row["return_date"]),
                returned=bool(row["returned"]),
            )
            for row in rows
        ]