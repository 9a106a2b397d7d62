"""tanglestat - validate a Tangle-style DAG ledger and report graph statistics."""

__version__ = "0.1.0"

from tanglestat.application.services import analyze, compute_stats, parse, parse_file, parse_text
from tanglestat.domain.exceptions import TangleStatError
from tanglestat.domain.model import InvalidNode, Ledger, Stats, ValidNode

__all__ = [
    "InvalidNode",
    "Ledger",
    "Stats",
    "TangleStatError",
    "ValidNode",
    "__version__",
    "analyze",
    "compute_stats",
    "parse",
    "parse_file",
    "parse_text",
]
