import logging
from typing import Optional

import typer

from commands import INVALID_OPTION, PROMPTS, Command, Request, Response, check_field, handle, parse_choice
from config import settings
from library import LibrarySystem
from utils.ui_helpers import normalize_output_mode, print_menu, print_response

APP_NAME = settings.app_name

logger = logging.getLogger(__name__)

app = typer.Typer(help="Library catalog console", add_completion=False)


def _read_line(prompt: str) -> Optional[str]:
    """One line from stdin, or None once input is exhausted."""
    try:
        return input(prompt)
    except EOFError:
        return None


def run_menu(system: LibrarySystem, mode: str = "plain", title: str = APP_NAME) -> None:
    """Interactive loop: read a choice and its fields, dispatch, print the response."""
    while True:
        print_menu(title, mode)
        raw = _read_line("Select an option: ")
        if raw is None:
            print_response(handle(system, Request(Command.EXIT)), mode)
            return

        command = parse_choice(raw)
        if command is None:
            print_response(Response(ok=False, message=INVALID_OPTION), mode)
            continue

        args = {}
        rejected = None
        for field_name, prompt in PROMPTS[command]:
            value = _read_line(prompt)
            if value is None:
                print_response(handle(system, Request(Command.EXIT)), mode)
                return
            args[field_name] = value
            rejected = check_field(system, command, field_name, value)
            if rejected is not None:
                break

        response = rejected or handle(system, Request(command, args))
        print_response(response, mode)
        if response.exit:
            return


@app.command()
def menu(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level for diagnostics written to stderr",
    ),
):
    """Start the interactive library menu."""
    try:
        mode = normalize_output_mode(output or settings.output_mode)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--output") from e

    level_name = (log_level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )

    with LibrarySystem(settings) as system:
        logger.info(f"Starting {APP_NAME} with {len(system.patrons)} registered user(s)")
        run_menu(system, mode)


if __name__ == "__main__":
    app()
