"""Reporter protocol: contract for all reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tanglestat.domain.model.analysis_result import AnalysisResult


class ReporterProtocol(Protocol):
    """Protocol for analysis result reporters.

    Output is str, not print(). Caller decides destination.
    """

    def report(self, result: AnalysisResult) -> str:
        """Format analysis result as string.

        Args:
            result: Analysis result to format.

        Returns:
            Formatted string representation.
        """
        ...
