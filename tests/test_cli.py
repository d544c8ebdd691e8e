import json

import pytest
from typer.testing import CliRunner

from main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def cli_settings(settings, monkeypatch):
    monkeypatch.setattr("main.settings", settings)
    return settings


def _session(*lines):
    return "\n".join(lines) + "\n"


def test_exit_immediately():
    result = runner.invoke(app, [], input=_session("0"))
    assert result.exit_code == 0
    assert "====== Library Management System ======" in result.stdout
    assert "1. Add New Book" in result.stdout
    assert "Exiting Library System. Goodbye!" in result.stdout


def test_add_search_and_list():
    result = runner.invoke(app, [], input=_session(
        "1", "Dune", "Frank Herbert", "111",
        "2", "Dune",
        "6",
        "0",
    ))
    assert result.exit_code == 0
    assert "Book added." in result.stdout
    assert result.stdout.count("Title: Dune, Author: Frank Herbert, ISBN: 111, Available: Yes") == 2


def test_search_not_found():
    result = runner.invoke(app, [], input=_session("2", "missing", "0"))
    assert result.exit_code == 0
    assert "Book not found." in result.stdout
    assert "Error:" not in result.stderr


def test_update_not_found_is_reported_as_error():
    result = runner.invoke(app, [], input=_session("3", "000", "T", "A", "0"))
    assert "Error: Book not found." in result.stderr
    assert "Error:" not in result.stdout


def test_borrow_and_return_session():
    result = runner.invoke(app, [], input=_session(
        "1", "Dune", "Herbert", "111",
        "4", "1001", "111",
        "4", "1002", "111",
        "7",
        "5", "1001", "111",
        "4", "1002", "111",
        "0",
    ))
    out = result.stdout
    assert result.exit_code == 0
    assert out.count("Book borrowed.") == 2
    assert "Error: Book not available." in result.stderr
    assert "Book returned." in out
    assert "User ID: 1001, Name: Mandeep" in out
    assert "  - Title: Dune, Author: Herbert, ISBN: 111, Available: No" in out


def test_borrow_unknown_user_stops_before_isbn_prompt():
    result = runner.invoke(app, [], input=_session(
        "1", "Dune", "H", "111",
        "4", "9999",
        "6",
        "0",
    ))
    assert result.exit_code == 0
    assert "Error: User not found." in result.stderr
    assert "Enter ISBN to borrow: " not in result.stdout
    assert "Title: Dune, Author: H, ISBN: 111, Available: Yes" in result.stdout


def test_return_unknown_user_stops_before_isbn_prompt():
    result = runner.invoke(app, [], input=_session("5", "9999", "7", "0"))
    assert result.exit_code == 0
    assert "Error: User not found." in result.stderr
    assert "Enter ISBN to return: " not in result.stdout
    assert "User ID: 1001, Name: Mandeep" in result.stdout


def test_return_not_borrowed():
    result = runner.invoke(app, [], input=_session("5", "1001", "111", "0"))
    assert "Error: You did not borrow this book." in result.stderr
    assert "Enter ISBN to return: " in result.stdout


@pytest.mark.parametrize("choice", ["9", "abc", "-3"])
def test_invalid_option_keeps_looping(choice):
    result = runner.invoke(app, [], input=_session(choice, "0"))
    assert result.exit_code == 0
    assert "Invalid option." in result.stdout
    assert "Exiting Library System. Goodbye!" in result.stdout


def test_end_of_input_exits_cleanly():
    result = runner.invoke(app, [], input="1\nDune\n")
    assert result.exit_code == 0
    assert "Exiting Library System. Goodbye!" in result.stdout
    assert "Book added." not in result.stdout


def test_json_output():
    result = runner.invoke(app, ["--output", "json"], input=_session("1", "Dune", "Herbert", "111", "6", "0"))
    assert result.exit_code == 0
    # Prompts are not newline-terminated, so each JSON document trails its prompt
    payloads = [json.loads(line[line.index('{"ok"'):]) for line in result.stdout.splitlines() if '{"ok"' in line]
    assert payloads[0] == {"ok": True, "message": "Book added."}
    assert payloads[1]["books"] == [{"title": "Dune", "author": "Herbert", "isbn": "111", "available": True}]


def test_rich_output_runs():
    result = runner.invoke(app, ["-o", "rich"], input=_session("1", "Dune", "Herbert", "111", "6", "7", "0"))
    assert result.exit_code == 0
    assert "Dune" in result.stdout


def test_bad_output_mode():
    result = runner.invoke(app, ["--output", "xml"], input=_session("0"))
    assert result.exit_code != 0
