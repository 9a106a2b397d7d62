"""Per-record rejection diagnostic."""

from dataclasses import dataclass

from tanglestat.domain.model.enums import RejectReason


@dataclass(frozen=True, slots=True)
class Rejection:
    """Why one input record became invalid.

    Attributes:
        record: 1-based index of the record in input order (must be >= 1)
        reason: Reject reason
    """

    record: int
    reason: RejectReason

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.record < 1:
            raise ValueError(f"record must be >= 1, got {self.record}")
        if not isinstance(self.reason, RejectReason):
            raise TypeError(f"reason must be RejectReason, got {type(self.reason).__name__}")

    def __str__(self) -> str:
        """Format as 'record N: description'."""
        return f"record {self.record}: {self.reason.description}"
