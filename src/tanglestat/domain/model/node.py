"""Ledger node: tagged union of ValidNode and InvalidNode.

References are 0-indexed positions into the internal sequence,
where the synthetic origin occupies slot 0.
"""

from dataclasses import dataclass
from typing import TypeAlias

U64_MAX = 2**64 - 1


@dataclass(frozen=True, slots=True)
class ValidNode:
    """Record that passed all structural and temporal checks.

    Attributes:
        left: Position of left approved record (None if it was invalid)
        right: Position of right approved record (None if it was invalid)
        timestamp: Unsigned 64-bit timestamp
    """

    left: int | None
    right: int | None
    timestamp: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.left is None and self.right is None:
            raise ValueError("valid node needs at least one resolved ref")
        if self.left is not None and self.left < 0:
            raise ValueError(f"left must be >= 0, got {self.left}")
        if self.right is not None and self.right < 0:
            raise ValueError(f"right must be >= 0, got {self.right}")
        if not 0 <= self.timestamp <= U64_MAX:
            raise ValueError(f"timestamp must be in [0, 2**64), got {self.timestamp}")

    @property
    def refs(self) -> tuple[int, ...]:
        """Resolved reference positions (left first)."""
        return tuple(r for r in (self.left, self.right) if r is not None)


@dataclass(frozen=True, slots=True)
class InvalidNode:
    """Record that failed validation. Carries no data."""


Node: TypeAlias = ValidNode | InvalidNode

INVALID = InvalidNode()

# Synthetic root at internal position 0. Never part of a public Ledger.
ORIGIN = ValidNode(left=0, right=0, timestamp=0)
