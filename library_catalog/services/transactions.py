import logging
from typing import Tuple

from library_catalog.book import Book
from library_catalog.exceptions import (
    BookNotAvailable,
    BookNotBorrowed,
    BookNotFound,
    NotBorrowedByThisUser,
    UserNotFound,
)
from library_catalog.store import RecordStore
from library_catalog.user import User

logger = logging.getLogger(__name__)


class TransactionService:
    """Moves books between the Available and Borrowed states.

    A book does not record who holds it; the holder is known only through
    the borrowing user's ``borrowed_books`` list. Every check runs before
    any mutation, so a rejected call leaves the store untouched.
    """

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    def check_borrowable(self, title: str) -> Book:
        """Resolve the book a borrow would target. Raises if it is missing or already out."""
        book = self._resolve_book(title)
        if not book.available:
            logger.info(f"Borrow rejected: book {book.book_id} ({title!r}) is already borrowed")
            raise BookNotAvailable(title, book.book_id)
        return book

    def check_returnable(self, title: str) -> Book:
        """Resolve the book a return would target. Raises if it is missing or not borrowed."""
        book = self._resolve_book(title)
        if book.available:
            logger.info(f"Return rejected: book {book.book_id} ({title!r}) is not borrowed")
            raise BookNotBorrowed(title, book.book_id)
        return book

    def borrow_book(self, title: str, user_id: int) -> Tuple[Book, User]:
        book = self.check_borrowable(title)
        user = self._resolve_user(user_id)

        book.available = False
        user.borrowed_books.append(book.book_id)
        logger.info(f"Book {book.book_id} ({title!r}) borrowed by user {user.user_id}")
        return book, user

    def return_book(self, title: str, user_id: int) -> Tuple[Book, User]:
        book = self.check_returnable(title)
        user = self._resolve_user(user_id)
        if not user.has_borrowed(book.book_id):
            logger.info(f"Return rejected: user {user_id} does not hold book {book.book_id}")
            raise NotBorrowedByThisUser(title, book.book_id, user_id)

        # list.remove drops only the first matching entry and keeps order
        user.borrowed_books.remove(book.book_id)
        book.available = True
        logger.info(f"Book {book.book_id} ({title!r}) returned by user {user.user_id}")
        return book, user

    # ------------------------- Helpers ------------------------- #
    def _resolve_book(self, title: str) -> Book:
        book = self.store.find_book_by_title(title)
        if book is None:
            logger.debug(f"No book titled {title!r}")
            raise BookNotFound(title)
        return book

    def _resolve_user(self, user_id: int) -> User:
        user = self.store.find_user_by_id(user_id)
        if user is None:
            logger.debug(f"No user with id {user_id}")
            raise UserNotFound(user_id)
        return user
