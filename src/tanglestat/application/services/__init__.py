"""Application services: ledger parsing and statistics.

parse → compute_stats is the whole pipeline. No feedback between them.
"""

from tanglestat.application.services.analyzer import (
    analyze,
    compute_depths,
    compute_stats,
    count_refs,
    txs_per_depth,
)
from tanglestat.application.services.parser import (
    parse,
    parse_file,
    parse_record,
    parse_text,
)

__all__ = [
    "analyze",
    "compute_depths",
    "compute_stats",
    "count_refs",
    "parse",
    "parse_file",
    "parse_record",
    "parse_text",
    "txs_per_depth",
]
