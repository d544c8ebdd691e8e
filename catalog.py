import logging
from typing import Iterator, Optional

from book import Book, BookRecord
from errors import BookNotFoundError

logger = logging.getLogger(__name__)


class _BookNode:
    __slots__ = ("book", "next")

    def __init__(self, book: Book, next_node: "Optional[_BookNode]" = None) -> None:
        self.book = book
        self.next = next_node


class LinkedCatalog:
    """Singly linked list that owns every book in the library.

    New books go to the front, so iteration and lookups see the most
    recently added book first. ISBNs are not checked for uniqueness; a
    lookup returns the first match in list order.
    """

    def __init__(self) -> None:
        self._head: Optional[_BookNode] = None
        self._count = 0

    # ------------------------- Core operations ------------------------- #
    def add_book(self, book: Book) -> None:
        self._head = _BookNode(book, self._head)
        self._count += 1
        logger.debug(f"Catalog now holds {self._count} book(s)")

    def find_by_isbn(self, isbn: str) -> Optional[Book]:
        for book in self:
            if book.isbn == isbn:
                return book
        return None

    def find_by_title(self, title: str) -> Optional[Book]:
        for book in self:
            if book.title == title:
                return book
        return None

    def update_book(self, isbn: str, title: str, author: str) -> Book:
        """Replace title and author in place. ISBN and availability stay as they were."""
        book = self.find_by_isbn(isbn)
        if book is None:
            raise BookNotFoundError()
        book.title = title
        book.author = author
        return book

    def iter_books(self) -> Iterator[BookRecord]:
        """Yield a snapshot of each book, front to back."""
        for book in self:
            yield book.snapshot()

    def clear(self) -> int:
        """Unlink and release every book. Returns how many were released."""
        released = 0
        while self._head is not None:
            node = self._head
            self._head = node.next
            node.next = None
            node.book = None  # type: ignore[assignment]
            released += 1
        self._count = 0
        logger.debug(f"Catalog released {released} book(s)")
        return released

    # ------------------------- Python protocol ------------------------- #
    def __iter__(self) -> Iterator[Book]:
        current = self._head
        while current is not None:
            yield current.book
            current = current.next

    def __len__(self) -> int:
        return self._count
