import logging

from library_catalog.library import Library
from library_catalog.user import Role

logger = logging.getLogger(__name__)


def seed_demo_data(lib: Library) -> None:
    # books
    lib.add_book("Dune", "Frank Herbert", "9780441172719")
    lib.add_book("Clean Code", "Robert C. Martin", "9780132350884")
    lib.add_book("The Pragmatic Programmer", "Andrew Hunt", "9780201616224")
    lib.add_book("Children of Dune", "Frank Herbert", "9780441104024")

    # users
    alice = lib.register_user("Alice Reader", Role.STUDENT)
    lib.register_user("Bob Professor", Role.FACULTY)

    # one book out so both states show up in listings
    lib.borrow_book("Clean Code", alice.user_id)

    logger.info(f"Demo data loaded: {len(lib.list_books())} books, {len(lib.list_users())} users")
