"""Ledger statistics value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Stats:
    """Aggregate statistics of a ledger.

    Immutable value object produced by compute_stats().

    Attributes:
        avg_dag_depth: Sum of reachable depths / (valid nodes + origin)
        avg_txs_per_depth: Reachable nodes / maximum depth
        avg_refs: Resolved references / (valid nodes + origin)
        pct_valid: Percentage of valid records (0-100)
        avg_tx_rate: Valid nodes per timestamp unit
    """

    avg_dag_depth: float
    avg_txs_per_depth: float
    avg_refs: float
    pct_valid: float
    avg_tx_rate: float

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.avg_dag_depth < 0:
            raise ValueError(f"avg_dag_depth must be >= 0, got {self.avg_dag_depth}")
        if self.avg_txs_per_depth < 0:
            raise ValueError(f"avg_txs_per_depth must be >= 0, got {self.avg_txs_per_depth}")
        if self.avg_refs < 0:
            raise ValueError(f"avg_refs must be >= 0, got {self.avg_refs}")
        if not 0.0 <= self.pct_valid <= 100.0:
            raise ValueError(f"pct_valid must be 0-100, got {self.pct_valid}")
        if self.avg_tx_rate < 0:
            raise ValueError(f"avg_tx_rate must be >= 0, got {self.avg_tx_rate}")

    @classmethod
    def empty(cls) -> Stats:
        """Stats of a ledger with no records."""
        return cls(
            avg_dag_depth=0.0,
            avg_txs_per_depth=0.0,
            avg_refs=0.0,
            pct_valid=100.0,
            avg_tx_rate=0.0,
        )
