"""JSON reporter: AnalysisResult → JSON string."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tanglestat.domain.model.analysis_result import AnalysisResult
    from tanglestat.domain.model.rejection import Rejection


class JsonReporter:
    """JSON reporter: outputs machine-readable JSON.

    Stats are emitted unrounded; rounding is a presentation concern.
    """

    def __init__(self, *, indent: int | None = 2, show_rejections: bool = False) -> None:
        """Initialize reporter.

        Args:
            indent: JSON indentation. None for compact output.
            show_rejections: Include per-record rejections.
        """
        self._indent = indent
        self._show_rejections = show_rejections

    def report(self, result: AnalysisResult) -> str:
        """Format analysis result as JSON string.

        Args:
            result: Analysis result to format.

        Returns:
            JSON string with summary, stats and optional rejections.
        """
        stats = result.stats
        data: dict[str, object] = {
            "summary": {
                "records": result.record_count,
                "valid": result.valid_count,
                "invalid": result.record_count - result.valid_count,
            },
            "stats": {
                "avg_dag_depth": stats.avg_dag_depth,
                "avg_txs_per_depth": stats.avg_txs_per_depth,
                "avg_refs": stats.avg_refs,
                "pct_valid": stats.pct_valid,
                "avg_tx_rate": stats.avg_tx_rate,
            },
        }
        if self._show_rejections:
            data["rejections"] = [_rejection_to_dict(r) for r in result.rejections]
        return json.dumps(data, indent=self._indent)


def _rejection_to_dict(rejection: Rejection) -> dict[str, object]:
    """Convert Rejection to dict."""
    return {
        "record": rejection.record,
        "reason": rejection.reason.value,
        "description": rejection.reason.description,
    }
