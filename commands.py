"""Menu commands as plain request/response values.

``handle`` is the only place a ``LibraryError`` is turned into a user-facing
message, so the console driver stays a thin read-print loop.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, List, Optional, Tuple

from book import BookRecord
from errors import BookNotFoundError, LibraryError, UserNotFoundError
from library import LibrarySystem
from patron import PatronRecord

logger = logging.getLogger(__name__)

GOODBYE = "Exiting Library System. Goodbye!"
INVALID_OPTION = "Invalid option."


class Command(IntEnum):
    EXIT = 0
    ADD_BOOK = 1
    SEARCH = 2
    UPDATE_BOOK = 3
    BORROW = 4
    RETURN = 5
    LIST_BOOKS = 6
    LIST_USERS = 7


MENU: List[Tuple[Command, str]] = [
    (Command.ADD_BOOK, "Add New Book"),
    (Command.SEARCH, "Search Book (ISBN or Title)"),
    (Command.UPDATE_BOOK, "Update Book Information"),
    (Command.BORROW, "Borrow Book"),
    (Command.RETURN, "Return Book"),
    (Command.LIST_BOOKS, "Display All Books"),
    (Command.LIST_USERS, "Display All Users"),
    (Command.EXIT, "Exit"),
]

# Fields each command needs, in the order the driver asks for them.
PROMPTS: Dict[Command, List[Tuple[str, str]]] = {
    Command.ADD_BOOK: [("title", "Enter title: "), ("author", "Enter author: "), ("isbn", "Enter ISBN: ")],
    Command.SEARCH: [("query", "Enter ISBN or Title: ")],
    Command.UPDATE_BOOK: [("isbn", "Enter ISBN to update: "), ("title", "New title: "), ("author", "New author: ")],
    Command.BORROW: [("user_id", "Enter User ID: "), ("isbn", "Enter ISBN to borrow: ")],
    Command.RETURN: [("user_id", "Enter User ID: "), ("isbn", "Enter ISBN to return: ")],
    Command.LIST_BOOKS: [],
    Command.LIST_USERS: [],
    Command.EXIT: [],
}


@dataclass(frozen=True)
class Request:
    command: Command
    args: Dict[str, str] = field(default_factory=dict)


@dataclass
class Response:
    ok: bool
    message: str = ""
    books: List[BookRecord] = field(default_factory=list)
    users: List[PatronRecord] = field(default_factory=list)
    error: bool = False
    exit: bool = False


def parse_choice(text: str) -> Optional[Command]:
    """Map a typed menu choice to a Command, or None when it is not one."""
    try:
        return Command(int(text.strip()))
    except ValueError:
        return None


def check_field(system: LibrarySystem, command: Command, field_name: str, value: str) -> Optional[Response]:
    """Validate one field as soon as it is read.

    Returns an error response when the command cannot go on, so the driver
    stops asking for the remaining fields.
    """
    if command in (Command.BORROW, Command.RETURN) and field_name == "user_id":
        try:
            system.find_user(value)
        except UserNotFoundError as e:
            return Response(ok=False, message=str(e), error=True)
    return None


def handle(system: LibrarySystem, request: Request) -> Response:
    args = request.args
    command = request.command
    try:
        if command is Command.ADD_BOOK:
            system.add_book(args.get("title", ""), args.get("author", ""), args.get("isbn", ""))
            return Response(ok=True, message="Book added.")
        if command is Command.SEARCH:
            try:
                book = system.search(args.get("query", ""))
            except BookNotFoundError as e:
                # A search miss is an answer, not an error.
                return Response(ok=False, message=str(e))
            return Response(ok=True, books=[book.snapshot()])
        if command is Command.UPDATE_BOOK:
            system.update_book(args.get("isbn", ""), args.get("title", ""), args.get("author", ""))
            return Response(ok=True, message="Book updated.")
        if command is Command.BORROW:
            system.borrow(args.get("user_id", ""), args.get("isbn", ""))
            return Response(ok=True, message="Book borrowed.")
        if command is Command.RETURN:
            system.return_book(args.get("user_id", ""), args.get("isbn", ""))
            return Response(ok=True, message="Book returned.")
        if command is Command.LIST_BOOKS:
            return Response(ok=True, books=list(system.list_books()))
        if command is Command.LIST_USERS:
            return Response(ok=True, users=list(system.list_users()))
        if command is Command.EXIT:
            return Response(ok=True, message=GOODBYE, exit=True)
    except LibraryError as e:
        logger.debug(f"{command.name} failed: {e}")
        return Response(ok=False, message=str(e), error=True)
    return Response(ok=False, message=INVALID_OPTION)
