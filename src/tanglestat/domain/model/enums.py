"""Domain enumerations."""

from enum import Enum


class RejectReason(Enum):
    """Why a record was downgraded to invalid."""

    ZERO_NODE = "zero_node"  # position 0 is not addressable
    FUTURE_REF = "future_ref"
    SELF_REF = "self_ref"
    NO_VALID_REF = "no_valid_ref"
    INVALID_TIMESTAMP = "invalid_timestamp"
    PARSE_ERROR = "parse_error"

    @property
    def description(self) -> str:
        """Human-readable reason."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    RejectReason.ZERO_NODE: "node 0 is not a valid node",
    RejectReason.FUTURE_REF: "nodes cannot reference future nodes",
    RejectReason.SELF_REF: "nodes cannot only reference themselves",
    RejectReason.NO_VALID_REF: "node needs one valid ref",
    RejectReason.INVALID_TIMESTAMP: "node has invalid timestamp",
    RejectReason.PARSE_ERROR: "failed to parse node",
}


class OutputFormat(Enum):
    """Report output format."""

    TEXT = "text"  # fixed five-line report
    CONSOLE = "console"  # rich table
    JSON = "json"
