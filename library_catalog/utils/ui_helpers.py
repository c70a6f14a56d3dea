import os
import json
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

from library_catalog.book import Book
from library_catalog.config import settings
from library_catalog.user import User

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

_console = Console()


def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode
    # Unknown values are ignored; the current mode stays in effect


def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, settings.output_mode).lower()
    return mode if mode in OUTPUT_MODES else "plain"


def yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def format_book(book: Book) -> str:
    return (
        f"Book ID: {book.book_id} | Title: {book.title} | Author: {book.author} "
        f"| ISBN: {book.isbn} | Available: {yes_no(book.available)}"
    )


def format_borrowed(user: User) -> str:
    if not user.borrowed_books:
        return "No borrowed books."
    return "Borrowed Book IDs: " + " ".join(str(i) for i in user.borrowed_books)


def print_book_list(books: List[Book], empty_message: str = "No books in the library.", title: Optional[str] = None) -> None:
    """Print books according to the current output mode.
    - plain: one 'Book ID: ... | Available: Yes/No' line per book
    - json: JSON array of book dicts
    - rich: Rich table
    """
    mode = get_output_mode()

    if not books:
        print(empty_message)
        return

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title=escape(title) if title else "📚 Books", show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True, justify="right")
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        table.add_column("ISBN", style="dim", no_wrap=True)
        table.add_column("Available", justify="center")
        for b in books:
            available = "[green]Yes[/]" if b.available else "[red]No[/]"
            table.add_row(str(b.book_id), escape(b.title), escape(b.author), escape(b.isbn), available)
        _console.print(table)
    else:
        for b in books:
            print(format_book(b))


def print_user_list(users: List[User]) -> None:
    """Print users and the ids of the books they hold."""
    mode = get_output_mode()

    if not users:
        print("No users registered.")
        return

    if mode == "json":
        print(json.dumps([u.to_dict() for u in users], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="👥 Users", show_lines=True, header_style="bold cyan")
        table.add_column("ID", style="magenta", no_wrap=True, justify="right")
        table.add_column("Name", style="white")
        table.add_column("Type", style="white")
        table.add_column("Borrowed Book IDs", style="white")
        for u in users:
            borrowed = " ".join(str(i) for i in u.borrowed_books) or "[dim]none[/]"
            table.add_row(str(u.user_id), escape(u.name), u.role.label, borrowed)
        _console.print(table)
    else:
        for u in users:
            print(f"User ID: {u.user_id} | Name: {u.name} | Type: {u.role.label}")
            print(f"   {format_borrowed(u)}")


def print_stats_result(stats: Dict[str, Any]) -> None:
    """Print statistics according to the current output mode."""
    mode = get_output_mode()

    if not stats:
        print("No statistics available.")
        return

    rows = [
        ("Total Books", stats.get("total_books", 0)),
        ("Available Books", stats.get("available_books", 0)),
        ("Borrowed Books", stats.get("borrowed_books", 0)),
        ("Unique Authors", stats.get("unique_authors", 0)),
        ("Total Users", stats.get("total_users", 0)),
        ("Students", stats.get("students", 0)),
        ("Faculty", stats.get("faculty", 0)),
    ]

    if mode == "json":
        print(json.dumps(stats, ensure_ascii=False))
    elif mode == "rich":
        content = "\n".join(f"[bold]{label}:[/] {value}" for label, value in rows)
        _console.print(Panel.fit(content, title="📊 Stats", border_style="blue"))
    else:
        for label, value in rows:
            print(f"{label}: {value}")
