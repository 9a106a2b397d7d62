"""Ledger aggregate: immutable sequence of parsed nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tanglestat.domain.model.node import InvalidNode, Node, ValidNode

if TYPE_CHECKING:
    from collections.abc import Iterator

    from tanglestat.domain.model.rejection import Rejection


@dataclass(frozen=True, slots=True)
class Ledger:
    """Parsed ledger, origin excluded.

    nodes[i] is input record i + 1. References inside nodes are positions
    in the internal sequence that has the origin at slot 0, so a reference
    to position p addresses nodes[p - 1] (p == 0 is the origin).

    Invariants (FAIL-FIRST):
    - Each rejection points at an InvalidNode
    - Rejection records are unique

    Attributes:
        nodes: Records in input order
        rejections: Diagnostics for invalid records (may be empty)
    """

    nodes: tuple[Node, ...]
    rejections: tuple[Rejection, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        seen: set[int] = set()
        for rejection in self.rejections:
            if rejection.record > len(self.nodes):
                raise ValueError(
                    f"rejection for record {rejection.record} beyond {len(self.nodes)} nodes"
                )
            if not isinstance(self.nodes[rejection.record - 1], InvalidNode):
                raise ValueError(f"rejected record {rejection.record} is not invalid")
            if rejection.record in seen:
                raise ValueError(f"duplicate rejection for record {rejection.record}")
            seen.add(rejection.record)

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    @property
    def valid_nodes(self) -> tuple[ValidNode, ...]:
        """Valid nodes in sequence order."""
        return tuple(n for n in self.nodes if isinstance(n, ValidNode))

    @property
    def valid_count(self) -> int:
        """Number of valid nodes."""
        return sum(1 for n in self.nodes if isinstance(n, ValidNode))

    @property
    def invalid_count(self) -> int:
        """Number of invalid nodes."""
        return len(self.nodes) - self.valid_count

    @classmethod
    def empty(cls) -> Ledger:
        """Create ledger with no records."""
        return cls(nodes=())
