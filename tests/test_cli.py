import re

from typer.testing import CliRunner

from library_catalog.config import settings
from library_catalog.main import app

runner = CliRunner()

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def run(args, *lines):
    """Invoke the CLI feeding one menu answer per line."""
    result = runner.invoke(app, args, input="".join(f"{line}\n" for line in lines))
    return result, ANSI.sub("", result.stdout)


def test_exit_immediately():
    result, out = run([], "0")
    assert result.exit_code == 0
    assert "Thank you for using the Library System!" in out


def test_menu_command():
    result, out = run(["menu"], "0")
    assert result.exit_code == 0
    assert "Manage Transactions" in out


def test_version_command():
    result, out = run(["version"])
    assert result.exit_code == 0
    assert settings.app_version in out


def test_invalid_menu_choice_reprompts():
    result, out = run([], "9", "0")
    assert result.exit_code == 0
    assert "Please select one of the available options" in out


def test_list_books_empty():
    result, out = run(["--output", "plain"], "1", "3", "0", "0")
    assert result.exit_code == 0
    assert "No books in the library." in out


def test_add_and_list_book():
    result, out = run(
        ["--output", "plain"],
        "1", "1", "Dune", "Frank Herbert", "9780441172719",
        "3", "0", "0",
    )
    assert result.exit_code == 0
    assert "Book Added with ID 0" in out
    assert "Book ID: 0 | Title: Dune | Author: Frank Herbert | ISBN: 9780441172719 | Available: Yes" in out


def test_add_book_cancelled():
    result, out = run([], "1", "1", "Dune", "0", "3", "0", "0")
    assert result.exit_code == 0
    assert "Book Added" not in out
    assert "No books in the library." in out


def test_search_books():
    result, out = run(["--demo"], "1", "2", "Herbert", "2", "Tolkien", "0", "0")
    assert result.exit_code == 0
    assert "Title: Dune |" in out
    assert "Title: Children of Dune |" in out
    assert "Title: Clean Code" not in out
    assert 'No books found matching "Tolkien".' in out


def test_register_user_rejects_bad_selector():
    result, out = run([], "2", "1", "3", "1", "Alice", "2", "0", "0")
    assert result.exit_code == 0
    assert "Only valid options are 1 or 2" in out
    assert "User Registered with ID 0 (Student)" in out
    assert "User ID: 0 | Name: Alice | Type: Student" in out
    assert "No borrowed books." in out


def test_register_user_cancelled():
    result, out = run([], "2", "1", "2", "0", "2", "0", "0")
    assert result.exit_code == 0
    assert "User Registered" not in out
    assert "No users registered." in out


def test_borrow_and_return():
    result, out = run(
        ["--demo"],
        "3", "1", "Dune", "1",
        "2", "Dune", "1",
        "0", "2", "2", "0", "0",
    )
    assert result.exit_code == 0
    assert 'Book "Dune" borrowed by User 1' in out
    assert 'Book "Dune" returned by User 1' in out
    # Alice still holds the demo loan
    assert "Borrowed Book IDs: 1" in out


def test_borrow_errors_keep_menu_running():
    result, out = run(
        ["--demo"],
        "3", "1", "Missing",
        "1", "Clean Code",
        "1", "Dune", "7",
        "0", "0",
    )
    assert result.exit_code == 0
    # Only the known, available title gets as far as the user id prompt
    assert out.count("Enter User ID") == 1
    assert '!! Error: No book with the title "Missing" exists.' in out
    assert '!! Error: Book "Clean Code" is not available.' in out
    assert "!! Error: No user with ID 7 exists." in out
    assert "Thank you for using the Library System!" in out


def test_return_errors():
    result, out = run(
        ["--demo"],
        "3", "2", "Dune",
        "2", "Clean Code", "1",
        "0", "0",
    )
    assert result.exit_code == 0
    assert out.count("Enter User ID") == 1
    assert '!! Error: Book "Dune" was not borrowed.' in out
    assert '!! Error: User 1 did not borrow "Clean Code".' in out


def test_user_id_prompt_cancel_and_invalid():
    result, out = run(
        ["--demo"],
        "3", "1", "Dune", "x",
        "1", "Dune", "abc",
        "1", "Dune", "1_0",
        "0", "4", "0",
    )
    assert result.exit_code == 0
    assert "borrowed by User" not in out
    assert "User ID must be a whole number" in out
    # None of the attempts changed anything
    assert "Borrowed Books: 1" in out


def test_stats_json():
    result, out = run(["--output", "json", "--demo"], "4", "0")
    assert result.exit_code == 0
    assert '"total_books": 4' in out
    assert '"borrowed_books": 1' in out
    assert '"faculty": 1' in out


def test_each_invocation_starts_empty():
    run([], "1", "1", "Dune", "Frank Herbert", "1", "0", "0")
    result, out = run([], "1", "3", "0", "0")
    assert "No books in the library." in out


def test_rich_output_with_markup_in_titles():
    result, out = run(
        ["--output", "rich"],
        "1", "1", "A [/] B", "[/bold]", "[red]1",
        "3", "2", "[/]",
        "0",
        "2", "1", "1", "[/bold]", "2", "0",
        "0",
    )
    assert result.exception is None
    assert result.exit_code == 0
    assert "A [/] B" in out
    assert "Results for '[/]'" in out
    assert "[/bold]" in out
