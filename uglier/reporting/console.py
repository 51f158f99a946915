# Rich console output: status messages, target lists and block tables.

from __future__ import annotations

import json
from typing import Any, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from uglier.blocks.base import BlockInfo

ERROR_STYLE = "bold dark_orange"
NAME_STYLE = "orange3"
OK_STYLE = "green"
TITLE_STYLE = "deep_sky_blue1"
HINT_STYLE = "grey58"


def _console() -> Console:
    return Console(highlight=False)


def _names(names: Sequence[str], style: str = NAME_STYLE) -> str:
    return ", ".join(f"[{style}]{escape(n)}[/{style}]" for n in names)


def print_error(message: str, detail: str | None = None) -> None:
    console = _console()
    console.print(f"[{ERROR_STYLE}]Error:[/{ERROR_STYLE}] {message}")
    if detail:
        console.print(detail)


def print_warning(message: str) -> None:
    _console().print(f"[{ERROR_STYLE}]Warning:[/{ERROR_STYLE}] {message}")


def print_success(message: str) -> None:
    _console().print(f"[{OK_STYLE}]✓[/{OK_STYLE}] {message}")


def print_hint(message: str) -> None:
    _console().print(f"[{HINT_STYLE}]{message}[/{HINT_STYLE}]")


def print_target_list(title: str, targets: Sequence[str]) -> None:
    """Print a titled bullet list of target names."""
    console = _console()
    console.print()
    console.print(f"[{TITLE_STYLE}]{title}[/{TITLE_STYLE}]")
    for target in targets:
        console.print(f"  [{OK_STYLE}]•[/{OK_STYLE}] {escape(target)}")


def print_no_targets(available: Sequence[str], example: str) -> None:
    print_error("No targets specified")
    console = _console()
    console.print()
    console.print(f"Available targets: {_names(available)}")
    console.print()
    print_hint(f"Example: {example}")


def print_invalid_targets(invalid: Sequence[str], valid: Sequence[str]) -> None:
    print_error(
        f"Invalid targets: {_names(invalid)}",
        f"Valid targets: {_names(valid, OK_STYLE)}",
    )


def print_not_found(names: Sequence[str]) -> None:
    print_warning(f"These targets are not in the config: {_names(names)}")


def print_current_targets(targets: Sequence[str]) -> None:
    console = _console()
    console.print()
    console.print(f"Current targets: {_names(targets, OK_STYLE)}")


def print_lint_hint(eslint_cmd: str) -> None:
    _console().print()
    print_hint(f"Run [bold]{eslint_cmd}[/bold] to lint your project")


def print_blocks(infos: Sequence[BlockInfo]) -> None:
    """Print a table of available config blocks."""
    console = _console()
    if not infos:
        console.print("No config blocks available.")
        return

    table = Table(
        title="Available config blocks",
        show_header=True,
        header_style="bold cyan",
        box=box.SIMPLE,
        padding=(0, 1),
    )
    table.add_column("Name", style="bold", no_wrap=True)
    table.add_column("Description", style="white")
    table.add_column("Default files", style="dim")

    for info in infos:
        table.add_row(info.name, info.description, escape(info.files_literal or "-"))

    console.print(table)


def print_config(configs: Sequence[Any]) -> None:
    """Print a composed flat-config array as highlighted JSON."""
    text = json.dumps(list(configs), indent=2)
    _console().print(
        Panel(
            Syntax(text, "json", word_wrap=True),
            title="Composed config",
            border_style="blue",
            box=box.ROUNDED,
        )
    )
