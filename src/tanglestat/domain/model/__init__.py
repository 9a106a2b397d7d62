"""Domain model: immutable value objects."""

from tanglestat.domain.model.analysis_result import AnalysisResult
from tanglestat.domain.model.configuration import AnalysisConfig
from tanglestat.domain.model.enums import OutputFormat, RejectReason
from tanglestat.domain.model.ledger import Ledger
from tanglestat.domain.model.node import INVALID, ORIGIN, InvalidNode, Node, ValidNode
from tanglestat.domain.model.rejection import Rejection
from tanglestat.domain.model.stats import Stats

__all__ = [
    "AnalysisConfig",
    "AnalysisResult",
    "INVALID",
    "InvalidNode",
    "Ledger",
    "Node",
    "ORIGIN",
    "OutputFormat",
    "RejectReason",
    "Rejection",
    "Stats",
    "ValidNode",
]
