"""Thresholds command: change and save the tier thresholds."""

from pathlib import Path
from typing import Optional

import typer

from ..exceptions import CodeOverviewError
from ..formatters import RichFormatter
from ..logging_config import setup_logging
from . import app
from ._common import CONFIG_OPTION, console, resolve_session


@app.command()
def thresholds(
    good: int = typer.Argument(..., help="Files at or above this many lines are medium", min=0),
    medium: int = typer.Argument(..., help="Files at or above this many lines are bad", min=0),
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
    """
    Save new thresholds and rescan.

    [bold cyan]Example:[/bold cyan]

      code-overview thresholds 100 250
    """
    setup_logging()

    try:
        session = resolve_session(path, config=config)
        if good > medium:
            console.print(
                "[yellow]Good threshold is above medium: no file will be classed medium.[/yellow]"
            )
        result = session.set_thresholds(good, medium)
        console.print(f"Saved thresholds to [bold]{session.config_file}[/bold]")
        RichFormatter(console).render(result, session.config)
    except CodeOverviewError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
