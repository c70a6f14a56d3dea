from typing import List, Optional

from library_catalog.book import Book
from library_catalog.user import Role, User


class RecordStore:
    """Holds every Book and User for the lifetime of the application.

    Books and users draw ids from independent counters that start at 0 and
    are never rewound, so an id is never handed out twice. Lookups are
    linear scans in insertion order; with duplicate titles the first book
    added wins.
    """

    def __init__(self) -> None:
        self._books: List[Book] = []
        self._users: List[User] = []
        self._next_book_id = 0
        self._next_user_id = 0

    # ------------------------- Creation ------------------------- #
    def create_book(self, title: str, author: str, isbn: str) -> Book:
        book = Book(self._next_book_id, title, author, isbn)
        self._next_book_id += 1
        self._books.append(book)
        return book

    def create_user(self, name: str, role: Role) -> User:
        if not isinstance(role, Role):
            raise TypeError(f"role must be a Role, got {type(role).__name__}")
        user = User(self._next_user_id, name, role)
        self._next_user_id += 1
        self._users.append(user)
        return user

    # ------------------------- Lookup ------------------------- #
    def find_book_by_title(self, title: str) -> Optional[Book]:
        """Return the first book whose title equals ``title`` exactly."""
        for book in self._books:
            if book.title == title:
                return book
        return None

    def find_user_by_id(self, user_id: int) -> Optional[User]:
        for user in self._users:
            if user.user_id == user_id:
                return user
        return None

    def list_books(self) -> List[Book]:
        return list(self._books)

    def list_users(self) -> List[User]:
        return list(self._users)
