"""Domain records of the library: books, clients and loans."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


class ValidationError(ValueError):
    """Raised when user-supplied data for a record is rejected."""


def _today() -> date:
    return date.today()


@dataclass
class Book:
    """A book in the catalogue; ``id`` is 0 until the book is stored."""

    title: str
    author: str
    publisher: str
    publish_date: date
    available: bool = True
    id: int = 0

    @property
    def availability(self) -> str:
        return "dostępna" if self.available else "niedostępna"

    def describe(self) -> str:
        """Return a one-line summary of the book."""
        return " ".join(
            (
                str(self.id),
                self.title,
                self.author,
                self.publisher,
                self.publish_date.isoformat(),
                self.availability,
            )
        )


@dataclass
class Client:
    """A registered library client; ``id`` is 0 until the client is stored."""

    first_name: str = ""
    last_name: str = ""
    birth_date: date = field(default_factory=_today)
    email: str = ""
    phone: str = ""
    id: int = 0

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def describe(self) -> str:
        """Return a one-line summary of the client."""
        return " ".join(
            (
                str(self.id),
                self.first_name,
                self.last_name,
                self.birth_date.isoformat(),
                self.email,
                self.phone,
            )
        )


@dataclass
class Loan:
    """A book lent to a client between two dates."""

    id: int = 0
    client_id: int = 0
    book_id: int = 0
    loan_date: date = field(default_factory=_today)
    return_date: date = field(default_factory=_today)
    returned: bool = False

    def __setattr__(self, name: str, value: object) -> None:
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("a loan's id cannot be changed")
        super().__setattr__(name, value)

    @property
    def status(self) -> str:
        return "zwrócona" if self.returned else "niezwrócona"

    def describe(self) -> str:
        """Return a one-line summary of the loan."""
        return " ".join(
            (
                str(self.id),
                str(self.client_id),
                str(self.book_id),
                self.loan_date.isoformat(),
                self.return_date.isoformat(),
                self.status,
            )
        )