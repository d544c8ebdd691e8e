from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from book import Book, BookRecord
from dynamic_array import DEFAULT_CAPACITY, DynamicArray
from errors import NotBorrowedError, UnavailableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatronRecord:
    name: str
    user_id: str
    borrowed: Tuple[BookRecord, ...]

    def display(self) -> str:
        lines = [f"User ID: {self.user_id}, Name: {self.name}", "Borrowed books:"]
        lines.extend(f"  - {record}" for record in self.borrowed)
        return "\n".join(lines)

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "name": self.name,
            "borrowed": [record.to_dict() for record in self.borrowed],
        }


class Patron:
    """A registered library user.

    ``borrowed`` holds references to books owned by the catalog. A book's
    ``available`` flag is the source of truth; this list mirrors it.
    """

    def __init__(self, name: str, user_id: str) -> None:
        self.name = name
        self.user_id = user_id
        self._borrowed: List[Book] = []

    @property
    def borrowed(self) -> Tuple[Book, ...]:
        return tuple(self._borrowed)

    def borrow(self, book: Book) -> None:
        if not book.available:
            logger.warning(f"User {self.user_id} tried to borrow unavailable ISBN {book.isbn!r}")
            raise UnavailableError()
        book.available = False
        self._borrowed.append(book)
        logger.info(f"User {self.user_id} borrowed ISBN {book.isbn!r}")

    def return_book(self, isbn: str) -> Book:
        """Hand back the first held book with this ISBN and mark it available."""
        for index, book in enumerate(self._borrowed):
            if book.isbn == isbn:
                book.available = True
                del self._borrowed[index]
                logger.info(f"User {self.user_id} returned ISBN {isbn!r}")
                return book
        logger.warning(f"User {self.user_id} does not hold ISBN {isbn!r}")
        raise NotBorrowedError()

    def display(self) -> str:
        return self.snapshot().display()

    def snapshot(self) -> PatronRecord:
        return PatronRecord(
            name=self.name,
            user_id=self.user_id,
            borrowed=tuple(book.snapshot() for book in self._borrowed),
        )

    def __str__(self) -> str:
        return f"UserID: {self.user_id}, Name: {self.name}, Books borrowed: {len(self._borrowed)}"

    def __repr__(self) -> str:
        return f"Patron(name={self.name!r}, user_id={self.user_id!r})"


class PatronRegistry:
    """Patrons keyed by unique user id, kept in registration order."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._patrons: DynamicArray[Patron] = DynamicArray(capacity)

    def add(self, patron: Patron) -> Patron:
        if self.find(patron.user_id) is not None:
            raise ValueError(f"User ID {patron.user_id} is already registered.")
        self._patrons.add(patron)
        logger.info(f"Registered user {patron.user_id} ({patron.name})")
        return patron

    def find(self, user_id: str) -> Optional[Patron]:
        for i in range(self._patrons.size()):
            if self._patrons[i].user_id == user_id:
                return self._patrons[i]
        return None

    def __iter__(self) -> Iterator[Patron]:
        return iter(self._patrons)

    def __len__(self) -> int:
        return len(self._patrons)
