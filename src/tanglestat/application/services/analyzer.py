"""Analyzer service: Ledger to Stats.

Pure functions, no state across calls. All edges point backward
(except the one-slot forward slack), so every metric is a linear scan.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tanglestat.domain.model.analysis_result import AnalysisResult
from tanglestat.domain.model.node import InvalidNode, ValidNode
from tanglestat.domain.model.stats import Stats

if TYPE_CHECKING:
    from tanglestat.domain.model.ledger import Ledger

logger = logging.getLogger(__name__)


def analyze(ledger: Ledger) -> AnalysisResult:
    """Compute stats and pair them with the ledger."""
    return AnalysisResult(ledger=ledger, stats=compute_stats(ledger))


def compute_stats(ledger: Ledger) -> Stats:
    """Compute aggregate statistics of a ledger.

    Args:
        ledger: Parsed ledger (origin excluded).

    Returns:
        Stats. Denominators of avg_dag_depth and avg_refs count the origin.
    """
    valid_nodes = ledger.valid_nodes
    total_nodes = len(valid_nodes) + 1  # include origin

    depths = compute_depths(ledger)
    avg_dag_depth = sum(depths) / total_nodes
    avg_refs = count_refs(ledger) / total_nodes

    histogram = txs_per_depth(depths)
    avg_txs_per_depth = sum(histogram) / len(histogram) if histogram else 0.0

    if ledger.nodes:
        pct_valid = 100.0 * len(valid_nodes) / len(ledger.nodes)
    else:
        pct_valid = 100.0

    if len(valid_nodes) > 1:
        start = valid_nodes[0].timestamp
        end = valid_nodes[-1].timestamp
        elapsed = abs(end - start) + 1  # inclusive window
        avg_tx_rate = len(valid_nodes) / elapsed
    else:
        avg_tx_rate = 0.0

    stats = Stats(
        avg_dag_depth=avg_dag_depth,
        avg_txs_per_depth=avg_txs_per_depth,
        avg_refs=avg_refs,
        pct_valid=pct_valid,
        avg_tx_rate=avg_tx_rate,
    )
    logger.debug("computed %s", stats)
    return stats


def compute_depths(ledger: Ledger) -> tuple[int, ...]:
    """Shortest valid-reference distance from the origin, per reachable node.

    Single forward pass: a ref only counts if its position already has a
    depth, so self refs and forward refs never contribute.

    Returns:
        Depths of reachable non-origin nodes, in sequence order.
    """
    depths: list[int | None] = [0]  # origin
    for node in ledger.nodes:
        match node:
            case ValidNode():
                candidates = [
                    depths[ref] + 1
                    for ref in node.refs
                    if ref < len(depths) and depths[ref] is not None
                ]
                depths.append(min(candidates) if candidates else None)
            case InvalidNode():
                depths.append(None)

    return tuple(d for d in depths[1:] if d is not None)


def count_refs(ledger: Ledger) -> int:
    """Count resolved references of valid nodes.

    A ref counts when its position is below the visible sequence length,
    so a ref to the last record's own slot or beyond is not counted.
    """
    size = len(ledger.nodes)
    total = 0
    for node in ledger.nodes:
        match node:
            case ValidNode():
                total += sum(1 for ref in node.refs if ref < size)
            case InvalidNode():
                pass
    return total


def txs_per_depth(depths: tuple[int, ...]) -> tuple[int, ...]:
    """Histogram of reachable nodes per depth level.

    Returns:
        Counts indexed by depth - 1, length = maximum depth (empty if none).
    """
    if not depths:
        return ()
    histogram = [0] * max(depths)
    for depth in depths:
        histogram[depth - 1] += 1
    return tuple(histogram)
