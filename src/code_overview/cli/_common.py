"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..config import load_settings
from ..session import ScanSession

console = Console()

PATH_ARGUMENT = typer.Argument(
    Path("."),
    help="Project root to scan",
    exists=True,
    file_okay=False,
    dir_okay=True,
)

CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    help="Settings file (JSON, default: <path>/CodeOverviewConfig.json)",
    file_okay=True,
    dir_okay=False,
)


def resolve_session(
    path: Path,
    config: Optional[Path] = None,
    workers: Optional[int] = None,
    **overrides,
) -> ScanSession:
    """Build a session from CLI options."""
    settings = load_settings(workers=workers)
    return ScanSession.open(path.resolve(), config_file=config, settings=settings, **overrides)
