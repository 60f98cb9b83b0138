"""Book catalogue operations: adding, listing, deleting and toggling books."""

from __future__ import annotations

from datetime import date

from .database import Database
from .models import Book, ValidationError


def availability_label(available: bool) -> str:
    """Return the label shown for a book's availability."""
    return "dostępna" if available else "niedostępna"


class BookCatalog:
    """Manages the books stored in a library database."""

    def __init__(self, database: Database) -> None:
        self._database = database

    def add(
        self,
        title: str,
        author: str,
        publisher: str,
        publish_date: date,
        available: bool = True,
        today: date | None = None,
    ) -> int:
        """Validate and store a new book; return its id."""
        title, author, publisher = title.strip(), author.strip(), publisher.strip()
        if not (title and author and publisher):
            raise ValidationError("Wszystkie pola muszą być wypełnione.")
        if publish_date > (today or date.today()):
            raise ValidationError("Data publikacji nie może być z przyszłości.")

        book = Book(
            title=title,
            author=author,
            publisher=publisher,
            publish_date=publish_date,
            available=available,
        )
        self._database.open()
        return self._database.add_book(book)

    def list(self) -> list[Book]:
        """Return every book in the catalogue."""
        return self._database.books()

    def delete(self, book_id: int) -> bool:
        """Delete a book; return whether a book was removed."""
        return self._database.execute("DELETE FROM books WHERE id = ?", (book_id,)) > 0

    def toggle_availability(self, book_id: int) -> bool:
        """Flip a book's availability and return the new value."""
        rows = self._database.query("SELECT available FROM books WHERE id = ?", (book_id,))
        if not rows:
            raise LookupError(f"no book with id {book_id}")
        new_value = not bool(rows[0]["available"])
        self._database.execute(
            "UPDATE books SET available = ? WHERE id = ?", (new_value, book_id)
        )
        return new_value