# librarydesk

A small circulation desk for a lending library. It keeps the catalogue of
books, the register of clients and the record of loans in one SQLite database
file, and covers the everyday work at the counter:

- adding books (title, author and publisher required, publication date not in
  the future), removing them and switching a book between available and
  unavailable;
- registering clients (all fields required, an e-mail address of the form
  `something@something` that is not already registered), finding them by
  first or last name regardless of case, and removing them together with
  their loan history once they have no open loans;
- lending a book to a client, with a return date later than the loan date;
  the book is then marked unavailable;
- taking books back, which marks the loan as returned on the given day and
  the book as available again;
- showing a client's full loan history.

Messages printed by the command and carried by errors are in Polish.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides the `librarydesk` command. Every call runs one
subcommand against the database file given by `--db` (default `library.db`,
created with its tables if it does not exist). Dates are written as
`YYYY-MM-DD`.

```
librarydesk --help
librarydesk add-client Anna Nowak 2000-01-01 anna@example.com 000
librarydesk clients --search now
librarydesk add-book "Lalka" "Bolesław Prus" "Gebethner i Wolff" 1890-01-01
librarydesk books
librarydesk lend 1 1 --return-date 2030-01-31
librarydesk loans 1
librarydesk return 1
librarydesk history 1
```

| Subcommand | What it does |
|---|---|
| `add-client FIRST LAST BIRTH_DATE EMAIL PHONE` | register a client |
| `clients [--search TEXT]` | list clients, optionally filtered by name |
| `delete-client CLIENT_ID` | delete a client with no open loans |
| `history CLIENT_ID` | show a client's loans: title, loan date, return date, returned (`tak`/`nie`) |
| `add-book TITLE AUTHOR PUBLISHER PUBLISH_DATE [--unavailable]` | add a book, available unless `--unavailable` |
| `books` | list all books |
| `delete-book BOOK_ID` | delete a book |
| `toggle-book BOOK_ID` | flip a book's availability |
| `lend CLIENT_ID BOOK_ID [--loan-date D] [--return-date D]` | lend a book; dates default to today and tomorrow |
| `loans CLIENT_ID` | list a client's open loans as `loan_id title` |
| `return [LOAN_ID ...]` | return the given loans today |

The command exits with status 0 on success and 1 when the database cannot be
opened, the input is rejected, a statement fails, a record is not found or a
delete removes nothing; the reason is printed on standard error.

## Using it from Python

Everything the command does is available as a library. `Database` is opened on
a file path and works as a context manager; the desk classes are built on top
of it.

```python
from datetime import date

from librarydesk.database import Database
from librarydesk.books import BookCatalog
from librarydesk.clients import ClientRegistry
from librarydesk.loans import LoanDesk, default_dates

with Database("library.db") as db:
    book_id = BookCatalog(db).add(
        title="Lalka",
        author="Bolesław Prus",
        publisher="Gebethner i Wolff",
        publish_date=date(1890, 1, 1),
    )
    client_id = ClientRegistry(db).add(
        first_name="Anna",
        last_name="Nowak",
        birth_date=date(2000, 1, 1),
        email="anna@example.com",
        phone="000",
    )

    desk = LoanDesk(db)
    loan_date, return_date = default_dates(date.today())
    loan_id = desk.lend(client_id, book_id, loan_date, return_date)
    print(desk.open_loans(client_id))
    desk.return_loans([loan_id])
```

- `librarydesk.models` holds the records `Book`, `Client` and `Loan`
  (dataclasses with a `describe()` one-line summary) and `ValidationError`.
- `librarydesk.database.Database` offers `open()`, `close()`, `query(sql,
  params)`, `execute(sql, params)`, `clients()`, `books()`, `add_client()`,
  `add_book()`, `add_loan()`, `return_loan()` and
  `mark_book_available_by_loan_id()`.
- `librarydesk.books`: `BookCatalog` with `add`, `list`, `delete` and
  `toggle_availability` (which returns the new value), plus
  `availability_label(available)`.
- `librarydesk.clients`: `ClientRegistry` with `add`, `search`, `delete` and
  `history` (a list of `HistoryEntry`), plus `is_valid_email` and
  `history_title`.
- `librarydesk.loans`: `LoanDesk` with `search_clients`, `available_books`,
  `lend`, `open_loans` (a list of `OpenLoan`) and `return_loans(loan_ids,
  today)`, which returns the ids actually closed; plus `default_dates(today)`.

Invalid input raises `librarydesk.models.ValidationError`; a failed database
operation raises `librarydesk.database.DatabaseError`; toggling a book that
does not exist raises `LookupError`.

## What it does not do

There is no graphical window: the desk is used through the command line or
from Python. Storage is a local SQLite file only; there is no connection to a
database server. `LoanDesk.lend` does not itself check that a book is
available — pick from `LoanDesk.available_books()`.