from typing import Any


class LibraryError(Exception):
    """Base class for recoverable catalog errors shown to the user."""


class BookNotFound(LibraryError, LookupError):
    def __init__(self, title: str) -> None:
        self.title = title
        super().__init__(f'No book with the title "{title}" exists.')


class BookNotAvailable(LibraryError):
    def __init__(self, title: str, book_id: int) -> None:
        self.title = title
        self.book_id = book_id
        super().__init__(f'Book "{title}" is not available.')


class BookNotBorrowed(LibraryError):
    def __init__(self, title: str, book_id: int) -> None:
        self.title = title
        self.book_id = book_id
        super().__init__(f'Book "{title}" was not borrowed.')


class UserNotFound(LibraryError, LookupError):
    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(f"No user with ID {user_id} exists.")


class NotBorrowedByThisUser(LibraryError):
    def __init__(self, title: str, book_id: int, user_id: int) -> None:
        self.title = title
        self.book_id = book_id
        self.user_id = user_id
        super().__init__(f'User {user_id} did not borrow "{title}".')


class InvalidRoleSelector(LibraryError, ValueError):
    def __init__(self, selector: Any) -> None:
        self.selector = selector
        super().__init__(f"Invalid role {selector!r}: only valid options are 1 (Student) or 2 (Faculty).")
