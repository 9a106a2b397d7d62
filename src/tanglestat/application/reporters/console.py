"""Console reporter: AnalysisResult → rich formatted string."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from tanglestat.domain.model.configuration import AnalysisConfig

if TYPE_CHECKING:
    from tanglestat.domain.model.analysis_result import AnalysisResult
    from tanglestat.domain.model.rejection import Rejection


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: AnalysisConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Analysis configuration. Uses defaults if None.
        """
        self._config = config or AnalysisConfig()

    def report(self, result: AnalysisResult) -> str:
        """Format analysis result as rich formatted string.

        Args:
            result: Analysis result to format.

        Returns:
            Formatted string with colors and tables.
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        self._render_header(console, result)
        self._render_stats(console, result)

        if self._config.show_rejections and result.rejections:
            self._render_rejections(console, result.rejections)

        return output.getvalue()

    def _render_header(self, console: Console, result: AnalysisResult) -> None:
        """Render header with record counts."""
        console.print()
        console.rule("[bold]LEDGER STATS[/bold]")
        console.print()

        invalid = result.record_count - result.valid_count
        style = "green" if invalid == 0 else "yellow"
        console.print(
            f"[bold]Records:[/bold] {result.record_count} "
            f"([{style}]valid: {result.valid_count}, invalid: {invalid}[/{style}])"
        )
        console.print()

    def _render_stats(self, console: Console, result: AnalysisResult) -> None:
        """Render the five metrics as a table."""
        stats = result.stats
        table = Table(show_header=True, header_style="bold")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")

        table.add_row("AVG DAG DEPTH", f"{stats.avg_dag_depth:.3f}")
        table.add_row("AVG TXS PER DEPTH", f"{stats.avg_txs_per_depth:.3f}")
        table.add_row("AVG REFS", f"{stats.avg_refs:.3f}")
        table.add_row("PCT VALID", f"{stats.pct_valid:.1f}%")
        table.add_row("AVG TX RATE", f"{stats.avg_tx_rate:.3f}")

        console.print(table)
        console.print()

    def _render_rejections(self, console: Console, rejections: tuple[Rejection, ...]) -> None:
        """Render per-record rejections."""
        console.print(f"[bold red]REJECTED RECORDS[/bold red] ({len(rejections)})")

        table = Table(show_header=True, header_style="bold")
        table.add_column("Record", justify="right")
        table.add_column("Reason", style="yellow")
        table.add_column("Description")

        for rejection in rejections:
            table.add_row(
                str(rejection.record),
                rejection.reason.value,
                rejection.reason.description,
            )

        console.print(table)
        console.print()
