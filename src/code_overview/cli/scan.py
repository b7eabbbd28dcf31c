"""Scan command: statistics and offender lists for a project."""

from pathlib import Path
from typing import List, Optional

import typer

from ..exceptions import CodeOverviewError
from ..formatters import JsonFormatter, RichFormatter
from ..logging_config import setup_logging
from . import app
from ._common import CONFIG_OPTION, PATH_ARGUMENT, console, resolve_session


@app.command()
def scan(
    path: Path = PATH_ARGUMENT,
    good: Optional[int] = typer.Option(
        None,
        "--good",
        "-g",
        help="Good threshold for this run (not saved)",
        min=0,
    ),
    medium: Optional[int] = typer.Option(
        None,
        "--medium",
        "-m",
        help="Medium threshold for this run (not saved)",
        min=0,
    ),
    exclude: Optional[List[str]] = typer.Option(
        None,
        "--exclude",
        "-x",
        help="Extra file name to exclude for this run (repeatable, not saved)",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
    config: Optional[Path] = CONFIG_OPTION,
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        help="Threads used to score files",
        min=1,
        max=32,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress logging",
    ),
):
    """
    Scan a project and list the files above the good threshold.

    [bold cyan]Examples:[/bold cyan]

      code-overview scan

      code-overview scan ./Assets --good 100 --medium 250

      code-overview scan . --exclude GameManager --json
    """
    logger = setup_logging(verbose=verbose, quiet=quiet)

    try:
        session = resolve_session(
            path,
            config=config,
            workers=workers,
            good_threshold=good,
            medium_threshold=medium,
        )
        for name in exclude or []:
            session.config.add_exclusion(name)

        result = session.refresh()

        if json_output:
            JsonFormatter().render(result, session.config)
        else:
            RichFormatter(console).render(result, session.config)

    except CodeOverviewError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        console.print(f"[red]Unexpected error:[/red] {e}")
        raise typer.Exit(1)
