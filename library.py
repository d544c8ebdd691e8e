import logging
from typing import Iterable, Iterator, Optional, Tuple

from book import Book, BookRecord
from catalog import LinkedCatalog
from config import Settings, settings as default_settings
from errors import BookNotFoundError, UserNotFoundError
from patron import Patron, PatronRecord, PatronRegistry

logger = logging.getLogger(__name__)


class LibrarySystem:
    """Owns the catalog and the patron registry and runs every library operation."""

    def __init__(self, settings: Optional[Settings] = None,
                 patrons: Optional[Iterable[Tuple[str, str]]] = None) -> None:
        self.settings = settings or default_settings
        self.catalog = LinkedCatalog()
        self.patrons = PatronRegistry(self.settings.array_capacity)

        seed = self.settings.seed_patron_pairs() if patrons is None else patrons
        for user_id, name in seed:
            self.patrons.add(Patron(name, user_id))

    # ------------------------- Catalog operations ------------------------- #
    def add_book(self, title: str, author: str, isbn: str) -> Book:
        """Create a book and put it at the front of the catalog. Duplicate ISBNs are allowed."""
        book = Book(title, author, isbn)
        self.catalog.add_book(book)
        logger.info(f"Added book ISBN {isbn!r}")
        return book

    def search(self, query: str) -> Book:
        """Exact ISBN match first, then exact title match."""
        book = self.catalog.find_by_isbn(query)
        if book is None:
            book = self.catalog.find_by_title(query)
        if book is None:
            raise BookNotFoundError()
        return book

    def update_book(self, isbn: str, title: str, author: str) -> Book:
        try:
            book = self.catalog.update_book(isbn, title, author)
        except BookNotFoundError:
            logger.warning(f"Update failed, no book with ISBN {isbn!r}")
            raise
        logger.info(f"Updated book ISBN {isbn!r}")
        return book

    # ------------------------- Circulation ------------------------- #
    def find_user(self, user_id: str) -> Patron:
        patron = self.patrons.find(user_id)
        if patron is None:
            logger.warning(f"Unknown user ID {user_id!r}")
            raise UserNotFoundError()
        return patron

    def borrow(self, user_id: str, isbn: str) -> Book:
        patron = self.find_user(user_id)
        book = self.catalog.find_by_isbn(isbn)
        if book is None:
            logger.warning(f"Borrow failed, no book with ISBN {isbn!r}")
            raise BookNotFoundError()
        patron.borrow(book)
        return book

    def return_book(self, user_id: str, isbn: str) -> Book:
        patron = self.find_user(user_id)
        return patron.return_book(isbn)

    # ------------------------- Listings ------------------------- #
    def list_books(self) -> Iterator[BookRecord]:
        return self.catalog.iter_books()

    def list_users(self) -> Iterator[PatronRecord]:
        for patron in self.patrons:
            yield patron.snapshot()

    # ------------------------- Lifecycle ------------------------- #
    def close(self) -> None:
        """Release every catalog book and drop the patrons that referenced them."""
        released = self.catalog.clear()
        self.patrons = PatronRegistry(self.settings.array_capacity)
        logger.debug(f"Library closed, {released} book(s) released")

    def __enter__(self) -> "LibrarySystem":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
