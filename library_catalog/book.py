from __future__ import annotations


class Book:
    """Represents a single book in the catalog."""

    def __init__(self, book_id: int, title: str, author: str, isbn: str, available: bool = True) -> None:
        self.book_id = book_id
        self.title = title
        self.author = author
        self.isbn = isbn
        self.available = available

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self.title} by {self.author} (ISBN: {self.isbn})"

    def __repr__(self) -> str:
        return f"Book(book_id={self.book_id!r}, title={self.title!r}, available={self.available!r})"

    def to_dict(self) -> dict:
        return {
            "book_id": self.book_id,
            "title": self.title,
            "author": self.author,
            "isbn": self.isbn,
            "available": self.available,
        }
