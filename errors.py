"""Exceptions raised by the catalog, patron and library layers."""


class LibraryError(Exception):
    """Base class for every recoverable library failure."""


class OutOfRangeError(LibraryError, IndexError):
    """Container index outside ``0 <= index < size``."""


class NotFoundError(LibraryError, LookupError):
    """A book or user lookup came back empty."""


class BookNotFoundError(NotFoundError):
    def __init__(self, message: str = "Book not found.") -> None:
        super().__init__(message)


class UserNotFoundError(NotFoundError):
    def __init__(self, message: str = "User not found.") -> None:
        super().__init__(message)


class UnavailableError(LibraryError):
    """Borrow attempted on a book somebody already holds."""

    def __init__(self, message: str = "Book not available.") -> None:
        super().__init__(message)


class NotBorrowedError(LibraryError):
    """Return attempted for a book the patron does not hold."""

    def __init__(self, message: str = "You did not borrow this book.") -> None:
        super().__init__(message)
