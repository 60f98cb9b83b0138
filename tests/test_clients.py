from datetime import date

import pytest

from librarydesk.clients import ClientRegistry, HistoryEntry, history_title, is_valid_email
from librarydesk.database import Database
from librarydesk.models import Book, ValidationError


@pytest.fixture
def db(tmp_path):
    database = Database(str(tmp_path / "lib.db"))
    database.open()
    yield database
    database.close()


@pytest.fixture
def registry(db):
    return ClientRegistry(db)


def _add(registry, first="Jan", last="Kowalski", email="jan@example.com"):
    return registry.add(first, last, date(1990, 3, 4), email, "100")


@pytest.mark.parametrize(
    "email,expected",
    [
        ("jan@example.com", True),
        ("a@b", True),
        ("jan", False),
        ("@example.com", False),
        ("jan@", False),
        ("jan @example.com", False),
    ],
)
def test_is_valid_email(email, expected):
    assert is_valid_email(email) is expected


def test_history_title():
    assert history_title("Jan", "Kowalski") == "Historia wypożyczeń: Jan Kowalski"


def test_add_stores_trimmed_client(registry, db):
    client_id = registry.add(" Jan ", " Kowalski ", date(1990, 3, 4), " jan@example.com ", " 100 ")
    clients = db.clients()
    assert [c.id for c in clients] == [client_id]
    client = clients[0]
    assert (client.first_name, client.last_name) == ("Jan", "Kowalski")
    assert client.email == "jan@example.com"
    assert client.phone == "100"
    assert client.birth_date == date(1990, 3, 4)


def test_add_rejects_empty_fields(registry, db):
    with pytest.raises(ValidationError):
        registry.add("Jan", "  ", date(1990, 1, 1), "jan@example.com", "100")
    assert db.clients() == []


def test_add_rejects_bad_email(registry, db):
    with pytest.raises(ValidationError):
        registry.add("Jan", "Kowalski", date(1990, 1, 1), "not-an-address", "100")
    assert db.clients() == []


def test_add_rejects_duplicate_email(registry, db):
    _add(registry)
    with pytest.raises(ValidationError):
        _add(registry, first="Anna", last="Nowak")
    assert len(db.clients()) == 1


def test_search_is_case_insensitive(registry):
    jan = _add(registry)
    anna = _add(registry, "Anna", "Żak", "anna@example.com")
    assert [c.id for c in registry.search("")] == [jan, anna]
    assert [c.id for c in registry.search("KOWAL")] == [jan]
    assert [c.id for c in registry.search("żak")] == [anna]
    assert registry.search("zzz") == []


def test_delete_client_without_loans(registry, db):
    client_id = _add(registry)
    assert registry.delete(client_id) is True
    assert db.clients() == []
    assert registry.delete(client_id) is False


def test_delete_refused_with_active_loan(registry, db):
    client_id = _add(registry)
    book_id = db.add_book(Book("T", "A", "P", date(2000, 1, 1)))
    loan_id = db.add_loan(client_id, book_id, date(2024, 1, 1), date(2024, 1, 15))
    with pytest.raises(ValidationError):
        registry.delete(client_id)
    assert [c.id for c in db.clients()] == [client_id]

    db.return_loan(loan_id)
    assert registry.delete(client_id) is True
    assert db.clients() == []
    assert db.query("SELECT * FROM loans") == []


def test_history(registry, db):
    client_id = _add(registry)
    other_id = _add(registry, "Anna", "Nowak", "anna@example.com")
    first_book = db.add_book(Book("Lalka", "Prus", "P", date(2000, 1, 1)))
    second_book = db.add_book(Book("Potop", "Sienkiewicz", "P", date(2000, 1, 1)))
    db.add_loan(client_id, first_book, date(2024, 1, 1), date(2024, 1, 15))
    db.add_loan(client_id, second_book, date(2024, 2, 1), date(2024, 2, 15))

    assert registry.history(client_id) == [
        HistoryEntry("Lalka", date(2024, 1, 1), date(2024, 1, 15), False),
        HistoryEntry("Potop", date(2024, 2, 1), date(2024, 2, 15), False),
    ]
    assert registry.history(other_id) == []