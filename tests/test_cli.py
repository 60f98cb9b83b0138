import pytest

from librarydesk.cli import build_parser, main


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "lib.db")


def _run(db_path, *args):
    return main(["--db", db_path, *args])


def test_parser_reads_lend_dates():
    args = build_parser().parse_args(
        ["lend", "1", "2", "--loan-date", "2024-01-01", "--return-date", "2024-01-03"]
    )
    assert args.command == "lend"
    assert (args.client_id, args.book_id) == (1, 2)
    assert args.return_date.isoformat() == "2024-01-03"


def test_parser_rejects_bad_date():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["add-book", "T", "A", "P", "not-a-date"])


def test_add_and_list_books(db_path, capsys):
    assert _run(db_path, "add-book", "Lalka", "Prus", "PIW", "2001-01-01") == 0
    assert "Dodano książkę." in capsys.readouterr().out
    assert _run(db_path, "books") == 0
    out = capsys.readouterr().out
    assert "Lalka Prus PIW 2001-01-01 dostępna" in out


def test_add_client_bad_email(db_path, capsys):
    status = _run(db_path, "add-client", "Anna", "Nowak", "1990-01-01", "bad-address", "555")
    assert status == 1
    assert "Niepoprawny adres e-mail." in capsys.readouterr().err


def test_lend_and_return_flow(db_path, capsys):
    _run(db_path, "add-client", "Anna", "Nowak", "1990-01-01", "anna@example.com", "555")
    _run(db_path, "add-book", "Lalka", "Prus", "PIW", "2001-01-01")
    capsys.readouterr()
    assert _run(db_path, "lend", "1", "1") == 0
    assert "Dodano wypożyczenie." in capsys.readouterr().out
    _run(db_path, "loans", "1")
    assert capsys.readouterr().out.strip() == "1 Lalka"
    assert _run(db_path, "return", "1") == 0
    assert "Zwrócono książkę(i)." in capsys.readouterr().out
    _run(db_path, "books")
    assert "dostępna" in capsys.readouterr().out.split()


def test_lend_rejects_bad_dates(db_path, capsys):
    _run(db_path, "add-client", "Anna", "Nowak", "1990-01-01", "anna@example.com", "555")
    _run(db_path, "add-book", "Lalka", "Prus", "PIW", "2001-01-01")
    capsys.readouterr()
    status = _run(
        db_path, "lend", "1", "1", "--loan-date", "2024-01-05", "--return-date", "2024-01-04"
    )
    assert status == 1
    assert "Data zwrotu musi być późniejsza" in capsys.readouterr().err


def test_return_nothing(db_path, capsys):
    assert _run(db_path, "return") == 0
    assert "Nie zaznaczono żadnych książek do zwrotu." in capsys.readouterr().out


def test_history_shows_title(db_path, capsys):
    _run(db_path, "add-client", "Anna", "Nowak", "1990-01-01", "anna@example.com", "555")
    _run(db_path, "add-book", "Lalka", "Prus", "PIW", "2001-01-01")
    _run(db_path, "lend", "1", "1", "--loan-date", "2024-01-01", "--return-date", "2024-01-09")
    capsys.readouterr()
    assert _run(db_path, "history", "1") == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Historia wypożyczeń: Anna Nowak"
    assert lines[1] == "Lalka 2024-01-01 2024-01-09 nie"


def test_history_unknown_client(db_path):
    assert _run(db_path, "history", "42") == 1


def test_delete_client_with_active_loan(db_path, capsys):
    _run(db_path, "add-client", "Anna", "Nowak", "1990-01-01", "anna@example.com", "555")
    _run(db_path, "add-book", "Lalka", "Prus", "PIW", "2001-01-01")
    _run(db_path, "lend", "1", "1")
    capsys.readouterr()
    assert _run(db_path, "delete-client", "1") == 1
    assert "Klient ma aktywne wypożyczenia." in capsys.readouterr().err