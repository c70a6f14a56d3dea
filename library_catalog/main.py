import logging
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Prompt
from rich.markup import escape
from rich import box

from library_catalog.config import settings
from library_catalog.exceptions import LibraryError
from library_catalog.library import Library
from library_catalog.seed import seed_demo_data
from library_catalog.utils.ui_helpers import (
    set_output_mode,
    print_book_list,
    print_user_list,
    print_stats_result,
)
from library_catalog.utils.validators import InputValidator

APP_NAME = settings.app_name

console = Console()
logger = logging.getLogger(__name__)


def _print_error(message: str) -> None:
    console.print(f"[bold red]!! Error:[/] {escape(message)}")


def _ask(label: str) -> str:
    return Prompt.ask(f">> {label}", console=console)


def _ask_user_id() -> Optional[int]:
    """Prompt for a user id. Returns None if the user cancelled or typed something invalid."""
    raw = _ask("Enter User ID (x to cancel)")
    if InputValidator.is_cancel_user_id(raw):
        return None
    try:
        return InputValidator.parse_user_id(raw)
    except ValueError as e:
        _print_error(str(e))
        return None


def _render_menu(title: str, items: list) -> str:
    table = Table.grid(padding=(0, 2))
    table.add_column(justify="right", style="bold cyan", width=4)
    table.add_column(justify="left", style="white")
    for key, label, icon in items:
        table.add_row(f"[reverse]{key}[/]", f"{icon} {label}")

    console.print(Panel(table, title=title, border_style="cyan", box=box.HEAVY, padding=(1, 2)))
    choices = [key for key, _, _ in items]
    return Prompt.ask("Enter your choice", choices=choices, console=console).strip()


# ------------------------- Books ------------------------- #
def add_book(lib: Library) -> None:
    """Prompt for a title, author and ISBN and add the book."""
    console.print("\n[bold]>> Add a Book[/]")
    title = _ask("Enter the Title (0 to cancel)")
    if InputValidator.is_cancel(title):
        return
    author = _ask("Enter the Author (0 to cancel)")
    if InputValidator.is_cancel(author):
        return
    isbn = _ask("Enter the ISBN (0 to cancel)")
    if InputValidator.is_cancel(isbn):
        return

    book = lib.add_book(title, author, isbn)
    console.print(f"[green]> Book Added with ID {book.book_id}[/]")


def search_books(lib: Library) -> None:
    """Search books by a title or author fragment."""
    console.print("\n[bold]>> Search Books[/]")
    term = _ask("Enter search term (Title or Author, 0 to cancel)")
    if InputValidator.is_cancel(term):
        return
    books = lib.search_books(term)
    print_book_list(books, empty_message=f'No books found matching "{term}".', title=f"🔎 Results for '{term}'")


def list_books(lib: Library) -> None:
    console.print("\n[bold]>> List All Books[/]")
    print_book_list(lib.list_books())


def manage_books(lib: Library) -> None:
    items = [
        ("1", "Add a Book", "➕"),
        ("2", "Search Books", "🔎"),
        ("3", "List All Books", "📚"),
        ("0", "Go Back", "↩"),
    ]
    while True:
        choice = _render_menu("Manage Books", items)
        if choice == "1":
            add_book(lib)
        elif choice == "2":
            search_books(lib)
        elif choice == "3":
            list_books(lib)
        elif choice == "0":
            break


# ------------------------- Users ------------------------- #
def register_user(lib: Library) -> None:
    """Prompt for a role and a name and register the user."""
    console.print("\n[bold]>> Register a New User[/]")
    while True:
        selector = _ask("Enter 1 for Student or 2 for Faculty (0 to cancel)")
        if InputValidator.is_cancel(selector):
            return
        if InputValidator.is_valid_role_selector(selector):
            break
        _print_error("Only valid options are 1 or 2")

    name = _ask("Enter name (0 to cancel)")
    if InputValidator.is_cancel(name):
        return

    try:
        user = lib.register_user(name, selector)
    except LibraryError as e:
        _print_error(str(e))
        return
    console.print(f"[green]> User Registered with ID {user.user_id} ({user.role.label})[/]")


def list_users(lib: Library) -> None:
    console.print("\n[bold]>> List All Users[/]")
    print_user_list(lib.list_users())


def manage_users(lib: Library) -> None:
    items = [
        ("1", "Register New User", "🧑"),
        ("2", "List All Users", "👥"),
        ("0", "Go Back", "↩"),
    ]
    while True:
        choice = _render_menu("Manage Users", items)
        if choice == "1":
            register_user(lib)
        elif choice == "2":
            list_users(lib)
        elif choice == "0":
            break


# ------------------------- Transactions ------------------------- #
def borrow_book(lib: Library) -> None:
    console.print("\n[bold]>> Borrow a Book[/]")
    title = _ask("Enter Book Title (0 to cancel)")
    if InputValidator.is_cancel(title):
        return
    try:
        lib.check_borrowable(title)
    except LibraryError as e:
        _print_error(str(e))
        return
    user_id = _ask_user_id()
    if user_id is None:
        return
    try:
        book, user = lib.borrow_book(title, user_id)
    except LibraryError as e:
        _print_error(str(e))
        return
    console.print(f'[green]> Book "{escape(book.title)}" borrowed by User {user.user_id}[/]')


def return_book(lib: Library) -> None:
    console.print("\n[bold]>> Return a Book[/]")
    title = _ask("Enter Book Title (0 to cancel)")
    if InputValidator.is_cancel(title):
        return
    try:
        lib.check_returnable(title)
    except LibraryError as e:
        _print_error(str(e))
        return
    user_id = _ask_user_id()
    if user_id is None:
        return
    try:
        book, user = lib.return_book(title, user_id)
    except LibraryError as e:
        _print_error(str(e))
        return
    console.print(f'[green]> Book "{escape(book.title)}" returned by User {user.user_id}[/]')


def manage_transactions(lib: Library) -> None:
    items = [
        ("1", "Borrow a Book", "📤"),
        ("2", "Return a Book", "📥"),
        ("0", "Go Back", "↩"),
    ]
    while True:
        choice = _render_menu("Manage Transactions", items)
        if choice == "1":
            borrow_book(lib)
        elif choice == "2":
            return_book(lib)
        elif choice == "0":
            break


def stats(lib: Library) -> None:
    print_stats_result(lib.get_statistics())


def run_menu(lib: Library) -> None:
    """Interactive main menu for the library CLI."""
    items = [
        ("1", "Manage Books", "📚"),
        ("2", "Manage Users", "👥"),
        ("3", "Manage Transactions", "🔁"),
        ("4", "Show Statistics", "📊"),
        ("0", "Exit", "🚪"),
    ]
    while True:
        choice = _render_menu(f"Welcome to the Library - {escape(APP_NAME)}", items)

        if choice == "1":
            manage_books(lib)
        elif choice == "2":
            manage_users(lib)
        elif choice == "3":
            manage_transactions(lib)
        elif choice == "4":
            stats(lib)
        elif choice == "0":
            console.print("[green]Thank you for using the Library System![/]")
            break
        print()  # blank line between operations


# --- Typer CLI application ---
app = typer.Typer(help="Library CLI", add_completion=False)


@app.callback(invoke_without_command=True)
def _global_options(
    ctx: typer.Context,
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format for listings: plain | json | rich (default: plain)",
    ),
    demo: bool = typer.Option(
        settings.seed_demo_data,
        "--demo/--no-demo",
        help="Start with a few sample books and users.",
    ),
):
    """Global options; starts the interactive menu when no command is given."""
    logging.basicConfig(level=settings.effective_log_level, format=settings.log_format)
    if output:
        set_output_mode(output)

    # The entry point owns the one Library for this process
    lib = Library()
    if demo:
        seed_demo_data(lib)
    ctx.obj = lib
    logger.debug(f"{APP_NAME} {settings.app_version} started ({settings.environment})")

    if ctx.invoked_subcommand is None:
        run_menu(lib)


@app.command("menu")
def cli_menu(ctx: typer.Context):
    """Start the interactive menu."""
    run_menu(ctx.obj)


@app.command("version")
def cli_version():
    """Show the application version."""
    print(f"{APP_NAME} {settings.app_version}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
