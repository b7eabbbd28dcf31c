"""Open command: open an offender in the default editor."""

from pathlib import Path
from typing import Optional

import typer

from ..exceptions import CodeOverviewError
from ..logging_config import setup_logging
from . import app
from ._common import CONFIG_OPTION, console, resolve_session


@app.command("open")
def open_file(
    name: str = typer.Argument(..., help="Offender file name without extension"),
    path: Path = typer.Option(
        Path("."),
        "--path",
        "-C",
        help="Project root",
        exists=True,
        file_okay=False,
        dir_okay=True,
    ),
    config: Optional[Path] = CONFIG_OPTION,
):
    """Open a medium or bad file in the system's editor."""
    setup_logging()
    try:
        session = resolve_session(path, config=config)
        scored = session.open_file(name)
    except CodeOverviewError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    console.print(f"Opened [bold]{scored.name}[/bold] ({scored.weight} lines)")
