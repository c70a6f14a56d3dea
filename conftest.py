import pytest

from library_catalog.library import Library
from library_catalog.user import Role
from library_catalog.utils.ui_helpers import OUTPUT_MODE_ENV


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    # set_output_mode writes to os.environ; monkeypatch restores it after each test
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")


@pytest.fixture
def lib():
    # Each test gets its own store
    return Library()


@pytest.fixture
def dune_lib(lib):
    """Library holding Book{0, "Dune"} and User{0, "Alice", Student}."""
    lib.add_book("Dune", "Frank Herbert", "9780441172719")
    lib.register_user("Alice", Role.STUDENT)
    return lib
