import json
import sys
from typing import Iterable, List

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from book import BookRecord
from commands import MENU, Response
from patron import PatronRecord

# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODES = ("plain", "json", "rich")

_console = Console()
_err_console = Console(stderr=True)


def normalize_output_mode(mode: str) -> str:
    mode = (mode or "").lower().strip()
    if mode not in OUTPUT_MODES:
        raise ValueError(f"Unknown output mode {mode!r}; use one of: {', '.join(OUTPUT_MODES)}")
    return mode


def print_menu(title: str, mode: str) -> None:
    if mode == "rich":
        table = Table.grid(padding=(0, 2))
        table.add_column(justify="right", style="bold cyan", width=4)
        table.add_column(justify="left", style="white")
        for command, label in MENU:
            table.add_row(f"[reverse]{int(command)}[/]", label)
        _console.print(Panel(table, title=escape(title), border_style="cyan"))
        return
    print(f"\n====== {title} ======")
    for command, label in MENU:
        print(f"{int(command)}. {label}")


def print_books(books: List[BookRecord], mode: str) -> None:
    """Print book snapshots.
    - plain: one 'Title: ..., Author: ..., ISBN: ..., Available: ...' line per book
    - json: JSON array of book objects
    - rich: Rich table
    """
    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="Books", show_lines=True, header_style="bold cyan")
        table.add_column("ISBN", style="magenta", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        table.add_column("Available", style="white")
        for b in books:
            table.add_row(escape(b.isbn), escape(b.title), escape(b.author), "Yes" if b.available else "No")
        _console.print(table)
    else:
        for b in books:
            print(b)


def print_users(users: Iterable[PatronRecord], mode: str) -> None:
    if mode == "json":
        print(json.dumps([u.to_dict() for u in users], ensure_ascii=False))
    elif mode == "rich":
        for u in users:
            body = "\n".join(f"- {escape(str(b))}" for b in u.borrowed) or "[dim]No borrowed books[/]"
            _console.print(Panel.fit(body, title=f"{escape(u.user_id)} · {escape(u.name)}", border_style="blue"))
    else:
        for u in users:
            print(u.display())


def print_response(response: Response, mode: str) -> None:
    """Render one command's response in the selected output mode."""
    if mode == "json":
        payload = {"ok": response.ok, "message": response.message}
        if response.books:
            payload["books"] = [b.to_dict() for b in response.books]
        if response.users:
            payload["users"] = [u.to_dict() for u in response.users]
        print(json.dumps(payload, ensure_ascii=False))
        return

    if response.books:
        print_books(response.books, mode)
    if response.users:
        print_users(response.users, mode)
    if not response.message:
        return

    if mode == "rich":
        if response.error:
            _err_console.print(f"[bold red]Error:[/] {escape(response.message)}")
        elif response.ok:
            _console.print(f"[green]{escape(response.message)}[/]")
        else:
            _console.print(f"[yellow]{escape(response.message)}[/]")
    elif response.error:
        print(f"Error: {response.message}", file=sys.stderr)
    else:
        print(response.message)
