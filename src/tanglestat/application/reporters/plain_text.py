"""Plain text reporter: fixed five-line report.

Stdlib-only reporter. Labels and precision are fixed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tanglestat.domain.model.analysis_result import AnalysisResult
    from tanglestat.domain.model.stats import Stats


class PlainTextReporter:
    """Plain text reporter.

    Output has no trailing newline; print() adds it.
    """

    def report(self, result: AnalysisResult) -> str:
        """Format stats as the five-line report.

        Args:
            result: Analysis result

        Returns:
            Report text
        """
        return format_stats(result.stats)


def format_stats(stats: Stats) -> str:
    """Format Stats with fixed labels and precision."""
    return "\n".join(
        (
            f"AVG DAG DEPTH: {stats.avg_dag_depth:.3f}",
            f"AVG TXS PER DEPTH: {stats.avg_txs_per_depth:.3f}",
            f"AVG REFS: {stats.avg_refs:.3f}",
            f"PCT VALID: {stats.pct_valid:.1f}%",
            f"AVG TX RATE: {stats.avg_tx_rate:.3f}",
        )
    )
