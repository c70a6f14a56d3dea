"""Library Catalog - in-memory catalog manager.

This package contains the application modules:
- Records (book.py, user.py)
- Record store (store.py)
- Catalog, membership and transaction services (services/)
- Library facade (library.py)
- CLI interface (main.py)
"""

from .book import Book
from .user import Role, User
from .exceptions import (
    LibraryError,
    BookNotFound,
    BookNotAvailable,
    BookNotBorrowed,
    UserNotFound,
    NotBorrowedByThisUser,
    InvalidRoleSelector,
)
from .store import RecordStore
from .library import Library

__all__ = [
    "Book",
    "Role",
    "User",
    "LibraryError",
    "BookNotFound",
    "BookNotAvailable",
    "BookNotBorrowed",
    "UserNotFound",
    "NotBorrowedByThisUser",
    "InvalidRoleSelector",
    "RecordStore",
    "Library",
]
