"""CLI commands."""

from __future__ import annotations

import json
import logging
import sys
from typing import TYPE_CHECKING, Annotated, Any, TextIO

import typer
from rich.console import Console

if TYPE_CHECKING:
    from tickbox.config import Settings

app = typer.Typer(
    name="tickbox",
    help="Pick items from a list with a keyboard-driven checkbox prompt.",
    no_args_is_help=False,
)
console = Console(stderr=True)

SEPARATOR_MARKER = "---"


def _get_settings() -> Settings:
    """Lazy import and load settings."""
    from tickbox.config import Settings

    return Settings.load()


def _read_stdin_choices() -> list[str]:
    """Read one choice per non-empty stdin line."""
    return [line.rstrip("\n") for line in sys.stdin if line.strip()]


def _reattach_tty() -> TextIO:
    """Point stdin back at the terminal after consuming piped input.

    Returns the opened handle; the caller closes it.
    """
    tty = open("/dev/tty")  # noqa: SIM115
    sys.stdin = tty
    return tty


def build_choices(raw: list[str], checked: list[str]) -> list[Any]:
    """Turn CLI strings into choices; ``---`` becomes a separator."""
    from tickbox.models import Choice, Separator

    wanted = set(checked)
    choices: list[Any] = []
    for text in raw:
        if text == SEPARATOR_MARKER:
            choices.append(Separator())
        else:
            choices.append(Choice(value=text, checked=text in wanted))
    return choices


# "---" separators must reach the choices, not the option parser.
@app.command(
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False}
)
def main(
    choices: Annotated[
        list[str] | None,
        typer.Argument(help="Choices to pick from (read from stdin when omitted)"),
    ] = None,
    message: Annotated[str, typer.Option("--message", "-m", help="Prompt title")] = "Select",
    required: Annotated[
        bool, typer.Option("--required", help="Refuse to confirm an empty selection")
    ] = False,
    loop: Annotated[
        bool | None, typer.Option("--loop/--no-loop", help="Wrap around at list ends")
    ] = None,
    page_size: Annotated[
        int | None, typer.Option("--page-size", "-n", help="Visible rows")
    ] = None,
    checked: Annotated[
        list[str] | None,
        typer.Option("--checked", "-c", help="Pre-check a choice (repeatable)"),
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print a JSON array")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
):
    """Show a checkbox prompt and print the selected choices."""
    from tickbox.config import PromptConfig
    from tickbox.errors import ConfigurationError, PromptCancelled
    from tickbox.ui.prompt import CheckboxPrompt

    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    tty: TextIO | None = None
    raw = list(choices or [])
    if not raw:
        if sys.stdin.isatty():
            console.print("[red]Error:[/red] No choices given (pass arguments or pipe lines)")
            raise typer.Exit(1)
        raw = _read_stdin_choices()
        try:
            tty = _reattach_tty()
        except OSError as e:
            console.print(f"[red]Error:[/red] Cannot open terminal: {e}")
            raise typer.Exit(1)

    try:
        try:
            options = _get_settings().prompt_options()
            if loop is not None:
                options["loop"] = loop
            if page_size is not None:
                options["page_size"] = page_size
            config = PromptConfig(
                choices=build_choices(raw, checked or []),
                message=message,
                required=required,
                **options,
            )
            prompt = CheckboxPrompt(config, console=console)
        except ConfigurationError as e:
            console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(1)

        try:
            values = prompt.run()
        except PromptCancelled:
            raise typer.Exit(130)
    finally:
        if tty is not None:
            tty.close()

    if as_json:
        typer.echo(json.dumps(list(values)))
    else:
        for value in values:
            typer.echo(value)
