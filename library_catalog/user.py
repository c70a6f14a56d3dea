from __future__ import annotations

from enum import Enum
from typing import List, Optional


class Role(Enum):
    STUDENT = "Student"
    FACULTY = "Faculty"

    @property
    def label(self) -> str:
        return self.value


class User:
    """A registered library member and the ids of the books they hold."""

    def __init__(self, user_id: int, name: str, role: Role, borrowed_books: Optional[List[int]] = None) -> None:
        self.user_id = user_id
        self.name = name
        self.role = role
        # Ordered by borrow time; a book id appears at most once.
        self.borrowed_books: List[int] = borrowed_books or []

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self.name} ({self.role.label})"

    def __repr__(self) -> str:
        return f"User(user_id={self.user_id!r}, name={self.name!r}, role={self.role.label!r})"

    def has_borrowed(self, book_id: int) -> bool:
        return book_id in self.borrowed_books

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "name": self.name,
            "role": self.role.label,
            "borrowed_books": list(self.borrowed_books),
        }
