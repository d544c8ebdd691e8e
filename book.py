from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class BookRecord:
    """Read-only copy of a book's state at the moment it was taken."""

    title: str
    author: str
    isbn: str
    available: bool

    def __str__(self) -> str:
        return (
            f"Title: {self.title}, Author: {self.author}, "
            f"ISBN: {self.isbn}, Available: {'Yes' if self.available else 'No'}"
        )

    def to_dict(self) -> dict:
        return asdict(self)


class Book:
    """A single book in the catalog."""

    def __init__(self, title: str, author: str, isbn: str, available: bool = True) -> None:
        # Stored exactly as typed; empty strings are legal.
        self.title = title
        self.author = author
        self.isbn = isbn
        self.available = available

    def __str__(self) -> str:
        return str(self.snapshot())

    def __repr__(self) -> str:
        return f"Book(title={self.title!r}, author={self.author!r}, isbn={self.isbn!r}, available={self.available!r})"

    def snapshot(self) -> BookRecord:
        return BookRecord(title=self.title, author=self.author, isbn=self.isbn, available=self.available)
