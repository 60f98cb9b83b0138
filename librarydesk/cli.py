"""Command-line front desk for library staff."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from datetime import date

from .books import BookCatalog
from .clients import ClientRegistry, history_title
from .database import DEFAULT_PATH, Database, DatabaseError
from .loans import LoanDesk, default_dates
from .models import ValidationError


def _iso_date(text: str) -> date:
    try:
        return date.fromisoformat(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date: {text!r}") from exc


def _add_client(db: Database, args: argparse.Namespace) -> int:
    ClientRegistry(db).add(args.first_name, args.last_name, args.birth_date, args.email, args.phone)
    print("Klient został dodany.")
    return 0


def _list_clients(db: Database, args: argparse.Namespace) -> int:
    for client in ClientRegistry(db).search(args.search):
        print(client.describe())
    return 0


def _delete_client(db: Database, args: argparse.Namespace) -> int:
    if ClientRegistry(db).delete(args.client_id):
        print("Usunięto klienta.")
        return 0
    print("Nie udało się usunąć klienta.", file=sys.stderr)
    return 1


def _history(db: Database, args: argparse.Namespace) -> int:
    client = next((c for c in db.clients() if c.id == args.client_id), None)
    if client is None:
        raise LookupError(f"no client with id {args.client_id}")
    print(history_title(client.first_name, client.last_name))
    for entry in ClientRegistry(db).history(args.client_id):
        state = "tak" if entry.returned else "nie"
        print(f"{entry.title} {entry.loan_date.isoformat()} {entry.return_date.isoformat()} {state}")
    return 0


def _add_book(db: Database, args: argparse.Namespace) -> int:
    BookCatalog(db).add(
        args.title, args.author, args.publisher, args.publish_date, not args.unavailable
    )
    print("Dodano książkę.")
    return 0


def _list_books(db: Database, args: argparse.Namespace) -> int:
    for book in BookCatalog(db).list():
        print(book.describe())
    return 0


def _delete_book(db: Database, args: argparse.Namespace) -> int:
    if BookCatalog(db).delete(args.book_id):
        print("Usunięto książkę.")
        return 0
    print("Nie udało się usunąć książki.", file=sys.stderr)
    return 1


def _toggle_book(db: Database, args: argparse.Namespace) -> int:
    BookCatalog(db).toggle_availability(args.book_id)
    print("Zmieniono dostępność książki.")
    return 0


def _lend(db: Database, args: argparse.Namespace) -> int:
    loan_default, return_default = default_dates(date.today())
    LoanDesk(db).lend(
        args.client_id,
        args.book_id,
        args.loan_date or loan_default,
        args.return_date or return_default,
    )
    print("Dodano wypożyczenie.")
    return 0


def _open_loans(db: Database, args: argparse.Namespace) -> int:
    for loan in LoanDesk(db).open_loans(args.client_id):
        print(f"{loan.loan_id} {loan.title}")
    return 0


def _return(db: Database, args: argparse.Namespace) -> int:
    if LoanDesk(db).return_loans(args.loan_ids):
        print("Zwrócono książkę(i).")
    else:
        print("Nie zaznaczono żadnych książek do zwrotu.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the front-desk commands."""
    parser = argparse.ArgumentParser(prog="librarydesk", description="Library front desk.")
    parser.add_argument("--db", default=DEFAULT_PATH, help="path of the database file")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("add-client", help="register a client")
    p.add_argument("first_name")
    p.add_argument("last_name")
    p.add_argument("birth_date", type=_iso_date)
    p.add_argument("email")
    p.add_argument("phone")
    p.set_defaults(handler=_add_client)

    p = sub.add_parser("clients", help="list clients")
    p.add_argument("--search", default="")
    p.set_defaults(handler=_list_clients)

    p = sub.add_parser("delete-client", help="delete a client")
    p.add_argument("client_id", type=int)
    p.set_defaults(handler=_delete_client)

    p = sub.add_parser("history", help="show a client's loan history")
    p.add_argument("client_id", type=int)
    p.set_defaults(handler=_history)

    p = sub.add_parser("add-book", help="add a book")
    p.add_argument("title")
    p.add_argument("author")
    p.add_argument("publisher")
    p.add_argument("publish_date", type=_iso_date)
    p.add_argument("--unavailable", action="store_true")
    p.set_defaults(handler=_add_book)

    p = sub.add_parser("books", help="list books")
    p.set_defaults(handler=_list_books)

    p = sub.add_parser("delete-book", help="delete a book")
    p.add_argument("book_id", type=int)
    p.set_defaults(handler=_delete_book)

    p = sub.add_parser("toggle-book", help="flip a book's availability")
    p.add_argument("book_id", type=int)
    p.set_defaults(handler=_toggle_book)

    p = sub.add_parser("lend", help="lend a book to a client")
    p.add_argument("client_id", type=int)
    p.add_argument("book_id", type=int)
    p.add_argument("--loan-date", type=_iso_date)
    p.add_argument("--return-date", type=_iso_date)
    p.set_defaults(handler=_lend)

    p = sub.add_parser("loans", help="list a client's open loans")
    p.add_argument("client_id", type=int)
    p.set_defaults(handler=_open_loans)

    p = sub.add_parser("return", help="return lent books")
    p.add_argument("loan_ids", type=int, nargs="*")
    p.set_defaults(handler=_return)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one front-desk command and return the exit status."""
    args = build_parser().parse_args(argv)
    database = Database(args.db)
    try:
        database.open()
    except DatabaseError:
        print("Nie można połączyć z bazą danych.", file=sys.stderr)
        return 1
    try:
        return args.handler(database, args)
    except (ValidationError, DatabaseError, LookupError) as exc:
        print(str(exc), file=sys.stderr)
        return 1
    finally:
        database.close()


if __name__ == "__main__":
    sys.exit(main())