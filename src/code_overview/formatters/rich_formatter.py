"""Rich terminal formatter for Code Overview."""

from typing import Optional

from rich.console import Console
from rich.table import Table

from ..config import ScanConfig
from ..scanning.models import ScanResult, ScoredFile
from .base import BaseFormatter

TIER_COLORS = {
    "good": "green",
    "medium": "yellow",
    "bad": "red",
}


def average_color(average: float, config: ScanConfig) -> str:
    """Color for the average line count.

    Unlike file tiering, both bounds are inclusive on the good side: an
    average exactly at the good threshold is still green.
    """
    if average <= config.good_threshold:
        return TIER_COLORS["good"]
    elif average <= config.medium_threshold:
        return TIER_COLORS["medium"]
    else:
        return TIER_COLORS["bad"]


def format_average(average: float) -> str:
    """Whole numbers print bare, anything else with one decimal."""
    if float(average).is_integer():
        return str(int(average))
    return f"{average:.1f}"


class RichFormatter(BaseFormatter):
    """Statistics panel followed by the two offender columns."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, result: ScanResult, config: ScanConfig) -> None:
        self._print_statistics(result, config)
        self._print_offenders(result)

    def format(self, result: ScanResult, config: ScanConfig) -> str:
        with self.console.capture() as capture:
            self.render(result, config)
        return capture.get()

    def _print_statistics(self, result: ScanResult, config: ScanConfig) -> None:
        table = Table(title="[bold]Statistics[/bold]", show_header=False, pad_edge=True)
        table.add_column("Metric", style="dim", min_width=24)
        table.add_column("Value", justify="right")

        table.add_row("Scripts count", str(result.scripts_count))
        table.add_row("Editor scripts count", str(result.editor_scripts_count))
        table.add_section()
        table.add_row("Total classes count", str(result.class_count))
        table.add_row("Behaviours count", str(result.behavior_subclass_count))
        table.add_row("Non-behaviours count", str(result.non_behavior_class_count))
        table.add_row("Interfaces count", str(result.interface_count))
        table.add_section()
        table.add_row("Total lines count", str(result.total_line_count))

        color = average_color(result.average_line_count, config)
        table.add_row(
            "Average line count",
            f"[{color}]{format_average(result.average_line_count)}[/{color}]",
        )

        self.console.print()
        self.console.print(table)
        self.console.print(
            f"  [dim]Thresholds: good < {config.good_threshold} <= medium "
            f"< {config.medium_threshold} <= bad[/dim]"
        )
        if config.excluded_files:
            self.console.print(f"  [dim]Excluded: {', '.join(config.excluded_files)}[/dim]")

    def _print_offenders(self, result: ScanResult) -> None:
        self.console.print()
        if not result.offenders:
            self.console.print("[green]No file exceeds the good threshold.[/green]")
            return

        grid = Table.grid(expand=True, padding=(0, 2))
        grid.add_column(ratio=1)
        grid.add_column(ratio=1)
        grid.add_row(
            self._offender_table("Medium", result.medium_offenders, TIER_COLORS["medium"]),
            self._offender_table("Bad", result.bad_offenders, TIER_COLORS["bad"]),
        )
        self.console.print(grid)

    @staticmethod
    def _offender_table(title: str, offenders: tuple[ScoredFile, ...], color: str) -> Table:
        table = Table(title=f"[bold {color}]{title}[/bold {color}]", expand=True)
        table.add_column("File")
        table.add_column("Lines", justify="right")
        for scored in offenders:
            label = f"[bold]{scored.name}[/bold]"
            if scored.is_editor_file:
                label += " [dim](editor)[/dim]"
            table.add_row(label, f"[{color}]{scored.weight}[/{color}]")
        return table
