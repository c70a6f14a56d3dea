from typing import Any, Dict, List, Optional, Tuple, Union

from library_catalog.book import Book
from library_catalog.services.catalog import CatalogService
from library_catalog.services.membership import MembershipService
from library_catalog.services.transactions import TransactionService
from library_catalog.store import RecordStore
from library_catalog.user import Role, User


class Library:
    """Wires one record store into the catalog, membership and transaction services.

    The entry point owns the Library; every service receives the same store,
    so there is exactly one set of records per running application.
    """

    def __init__(self, store: Optional[RecordStore] = None) -> None:
        self.store = store if store is not None else RecordStore()
        self.catalog = CatalogService(self.store)
        self.membership = MembershipService(self.store)
        self.transactions = TransactionService(self.store)

    # ------------------------- Books ------------------------- #
    def add_book(self, title: str, author: str, isbn: str) -> Book:
        return self.catalog.add_book(title, author, isbn)

    def list_books(self) -> List[Book]:
        return self.catalog.list_books()

    def search_books(self, term: str) -> List[Book]:
        return self.catalog.search_books(term)

    # ------------------------- Users ------------------------- #
    def register_user(self, name: str, role: Union[Role, int, str]) -> User:
        return self.membership.register_user(name, role)

    def list_users(self) -> List[User]:
        return self.membership.list_users()

    # ------------------------- Transactions ------------------------- #
    def check_borrowable(self, title: str) -> Book:
        return self.transactions.check_borrowable(title)

    def check_returnable(self, title: str) -> Book:
        return self.transactions.check_returnable(title)

    def borrow_book(self, title: str, user_id: int) -> Tuple[Book, User]:
        return self.transactions.borrow_book(title, user_id)

    def return_book(self, title: str, user_id: int) -> Tuple[Book, User]:
        return self.transactions.return_book(title, user_id)

    # ------------------------- Reporting ------------------------- #
    def get_statistics(self) -> Dict[str, Any]:
        """Get library statistics."""
        books = self.store.list_books()
        users = self.store.list_users()
        available = sum(1 for b in books if b.available)
        students = sum(1 for u in users if u.role is Role.STUDENT)
        return {
            "total_books": len(books),
            "available_books": available,
            "borrowed_books": len(books) - available,
            "unique_authors": len({b.author for b in books}),
            "total_users": len(users),
            "students": students,
            "faculty": len(users) - students,
        }
