"""Tests for domain/model/ledger.py and domain/model/rejection.py."""

import pytest

from tanglestat.domain.model.enums import RejectReason
from tanglestat.domain.model.ledger import Ledger
from tanglestat.domain.model.node import INVALID
from tanglestat.domain.model.rejection import Rejection
from tests.factories import make_ledger, make_node, make_rejected_ledger


class TestLedger:
    """Tests for Ledger."""

    def test_empty(self) -> None:
        ledger = Ledger.empty()
        assert len(ledger) == 0
        assert ledger.rejections == ()

    def test_len_and_iter(self) -> None:
        ledger = make_ledger(make_node(0, 0), INVALID)
        assert len(ledger) == 2
        assert list(ledger) == [make_node(0, 0), INVALID]

    def test_valid_nodes_in_order(self) -> None:
        first = make_node(0, 0, 3)
        second = make_node(1, 0, 1)
        ledger = make_ledger(first, INVALID, second)
        assert ledger.valid_nodes == (first, second)

    def test_counts(self) -> None:
        ledger = make_rejected_ledger()
        assert ledger.valid_count == 1
        assert ledger.invalid_count == 1

    def test_rejection_must_point_at_invalid(self) -> None:
        with pytest.raises(ValueError, match="is not invalid"):
            make_ledger(
                make_node(0, 0),
                rejections=(Rejection(record=1, reason=RejectReason.SELF_REF),),
            )

    def test_rejection_beyond_nodes(self) -> None:
        with pytest.raises(ValueError, match="beyond"):
            make_ledger(
                INVALID,
                rejections=(Rejection(record=2, reason=RejectReason.SELF_REF),),
            )

    def test_duplicate_rejection(self) -> None:
        rejection = Rejection(record=1, reason=RejectReason.SELF_REF)
        with pytest.raises(ValueError, match="duplicate"):
            make_ledger(INVALID, rejections=(rejection, rejection))

    def test_invalid_without_rejection_allowed(self) -> None:
        assert make_ledger(INVALID).invalid_count == 1


class TestRejection:
    """Tests for Rejection."""

    def test_str(self) -> None:
        rejection = Rejection(record=3, reason=RejectReason.ZERO_NODE)
        assert str(rejection) == "record 3: node 0 is not a valid node"

    def test_record_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="record must be >= 1"):
            Rejection(record=0, reason=RejectReason.ZERO_NODE)

    def test_reason_type_checked(self) -> None:
        with pytest.raises(TypeError):
            Rejection(record=1, reason="zero_node")  # type: ignore[arg-type]


class TestRejectReason:
    """Tests for RejectReason."""

    def test_every_reason_has_description(self) -> None:
        for reason in RejectReason:
            assert reason.description
