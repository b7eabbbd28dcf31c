"""CLI entry point: registers all subcommands."""

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="code-overview",
    help="Code Overview - find the source files that carry too much code",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"code-overview {__version__}")
        raise typer.Exit()


@app.callback()
def _root(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """Code Overview - find the source files that carry too much code."""


# Import subcommands to register them
from .scan import scan as _scan  # noqa: F401, E402
from .thresholds import thresholds as _thresholds  # noqa: F401, E402
from .exclude import exclude_app  # noqa: E402
from .open_file import open_file as _open_file  # noqa: F401, E402

app.add_typer(exclude_app, name="exclude")


def main() -> None:
    app()
