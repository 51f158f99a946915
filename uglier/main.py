from __future__ import annotations

"""
Typer CLI entry point for uglier.

Commands:
- install            install the config package and eslint into the project
- init <targets>     generate eslint.config.js with the given environments
- add <targets>      add environments to an existing eslint.config.js
- remove <targets>   remove environments (and their overrides)
- list               show the available config blocks
- compose <names>    print the flat config the named blocks produce

File operations report their own problems; a failed operation exits with
status 1.
"""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape

from uglier.blocks.registry import get_default_registry
from uglier.config import DOCS_URL, Config, get_default_config
from uglier.errors import InstallError, UnknownBlockError
from uglier.installer import install as install_packages
from uglier.operations import add_to_config, generate_config, remove_from_config
from uglier.reporting import console as report

logger = logging.getLogger(__name__)

app = typer.Typer(help="uglier - Composable ESLint flat config.", no_args_is_help=True)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


def _config(ctx: typer.Context) -> Config:
    if isinstance(ctx.obj, Config):
        return ctx.obj
    return get_default_config()


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    cwd: Optional[Path] = typer.Option(
        None,
        "--cwd",
        exists=True,
        file_okay=False,
        resolve_path=True,
        help="Project directory (defaults to the current directory).",
    ),
) -> None:
    """Composable ESLint flat config."""
    _configure_logging(verbose)
    ctx.obj = get_default_config(cwd)


@app.command()
def install(ctx: typer.Context) -> None:
    """Install the package and its peer dependencies."""
    config = _config(ctx)
    typer.echo(f"Installing {config.package_name}...")
    try:
        installed, info = install_packages(config)
    except InstallError as exc:
        logger.debug("Install failed", exc_info=True)
        report.print_error(escape(str(exc)))
        raise typer.Exit(code=1)

    for name in (config.package_name, *config.peer_deps):
        if name not in installed:
            report.print_success(f"[bold]{name}[/bold] already installed")
    if installed:
        report.print_hint(f"Using package manager: {info.manager}")
        report.print_success(f"Installed: {', '.join(installed)}")

    typer.echo()
    typer.echo("For detailed setup and configuration options, visit:")
    typer.echo(DOCS_URL)


@app.command()
def init(
    ctx: typer.Context,
    targets: Optional[List[str]] = typer.Argument(None, help="Environments to include (node, web, ...)."),
) -> None:
    """Generate eslint.config.js with the given targets."""
    if not generate_config(targets or [], config=_config(ctx)):
        raise typer.Exit(code=1)


@app.command()
def add(
    ctx: typer.Context,
    targets: Optional[List[str]] = typer.Argument(None, help="Environments to add."),
) -> None:
    """Add config blocks to an existing eslint.config.js."""
    if not add_to_config(targets or [], config=_config(ctx)):
        raise typer.Exit(code=1)


@app.command()
def remove(
    ctx: typer.Context,
    targets: Optional[List[str]] = typer.Argument(None, help="Environments to remove."),
) -> None:
    """Remove config blocks (and their overrides) from eslint.config.js."""
    result = remove_from_config(targets or [], config=_config(ctx))
    if not result.success:
        raise typer.Exit(code=1)


@app.command("list")
def list_blocks() -> None:
    """Show the available config blocks."""
    report.print_blocks(get_default_registry().infos())


@app.command()
def compose(
    names: List[str] = typer.Argument(..., help="Config blocks to compose, in order."),
    without: List[str] = typer.Option([], "--without", "-x", help="Blocks to leave out."),
) -> None:
    """Print the flat config produced by the named blocks."""
    try:
        configs = get_default_registry().compose(names, without=without)
    except UnknownBlockError as exc:
        raise typer.BadParameter(str(exc), param_hint="NAMES")
    report.print_config(configs)


def main() -> None:
    """Entry point for `python -m uglier.main` and the `uglier` script."""
    app()


if __name__ == "__main__":
    main()
