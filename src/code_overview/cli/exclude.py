"""Exclude commands: manage the files kept out of the offender lists."""

from pathlib import Path
from typing import Optional

import typer

from ..exceptions import CodeOverviewError
from ..logging_config import setup_logging
from ._common import CONFIG_OPTION, console, resolve_session

exclude_app = typer.Typer(help="Manage excluded files", no_args_is_help=True)

PATH_OPTION = typer.Option(
    Path("."),
    "--path",
    "-C",
    help="Project root",
    exists=True,
    file_okay=False,
    dir_okay=True,
)


@exclude_app.command("add")
def add(
    name: str = typer.Argument(..., help="File name without extension"),
    path: Path = PATH_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
):
    """Exclude a scanned file and save the setting."""
    setup_logging()
    try:
        session = resolve_session(path, config=config)
        session.add_exclusion(name)
    except CodeOverviewError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    console.print(f"Excluded [bold]{name}[/bold]")


@exclude_app.command("remove")
def remove(
    name: str = typer.Argument(..., help="File name without extension"),
    path: Path = PATH_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
):
    """Stop excluding a file and save the setting."""
    setup_logging()
    try:
        session = resolve_session(path, config=config)
        session.remove_exclusion(name)
    except CodeOverviewError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    console.print(f"No longer excluding [bold]{name}[/bold]")


@exclude_app.command("list")
def list_excluded(
    path: Path = PATH_OPTION,
    config: Optional[Path] = CONFIG_OPTION,
    candidates: bool = typer.Option(
        False,
        "--candidates",
        help="List the scanned files that could still be excluded",
    ),
):
    """Show excluded files, or the files that could be excluded."""
    setup_logging()
    try:
        session = resolve_session(path, config=config)
        if candidates:
            session.refresh()
            names = session.candidates_for_exclusion()
        else:
            names = list(session.config.excluded_files)
    except CodeOverviewError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if not names:
        console.print("[dim]Nothing to list.[/dim]")
        return
    for name in names:
        console.print(name)
