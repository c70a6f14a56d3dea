import logging
from typing import List

from library_catalog.book import Book
from library_catalog.store import RecordStore

logger = logging.getLogger(__name__)


class CatalogService:
    """Adds books to the store and answers discovery queries."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    def add_book(self, title: str, author: str, isbn: str) -> Book:
        book = self.store.create_book(title, author, isbn)
        logger.info(f"Book added: id={book.book_id}, title={book.title!r}")
        return book

    def list_books(self) -> List[Book]:
        return self.store.list_books()

    def search_books(self, term: str) -> List[Book]:
        """Search for books by title or author (case-sensitive substring)."""
        results = [b for b in self.store.list_books() if term in b.title or term in b.author]
        logger.debug(f"Search {term!r} matched {len(results)} book(s)")
        return results
