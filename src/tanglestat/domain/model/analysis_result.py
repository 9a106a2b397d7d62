"""Analysis result aggregate handed to reporters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tanglestat.domain.model.ledger import Ledger
from tanglestat.domain.model.stats import Stats

if TYPE_CHECKING:
    from tanglestat.domain.model.rejection import Rejection


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Parsed ledger together with its statistics.

    Used by ReporterProtocol.report() method.

    Attributes:
        ledger: Parsed ledger
        stats: Statistics computed from ledger
    """

    ledger: Ledger
    stats: Stats

    @property
    def record_count(self) -> int:
        """Number of input records."""
        return len(self.ledger)

    @property
    def valid_count(self) -> int:
        """Number of valid records."""
        return self.ledger.valid_count

    @property
    def rejections(self) -> tuple[Rejection, ...]:
        """Per-record rejection diagnostics."""
        return self.ledger.rejections

    @classmethod
    def empty(cls) -> AnalysisResult:
        """Result for a ledger with no records."""
        return cls(ledger=Ledger.empty(), stats=Stats.empty())
