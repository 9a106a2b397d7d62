"""Parser service: ledger text to Ledger.

Single forward pass, no backtracking. Each record is validated only
against the records before it.
FAIL-FIRST: LedgerFormatError / LedgerReadError on malformed input.
Per-record failures are local: the record becomes INVALID.
"""

from __future__ import annotations

import io
import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING

from tanglestat.domain.exceptions import (
    HeaderParseError,
    LedgerReadError,
    MalformedRecordError,
    MissingHeaderError,
    RecordRejected,
    TrailingContentError,
    UnexpectedEndOfInputError,
)
from tanglestat.domain.model.enums import RejectReason
from tanglestat.domain.model.ledger import Ledger
from tanglestat.domain.model.node import INVALID, ORIGIN, U64_MAX, InvalidNode, ValidNode
from tanglestat.domain.model.rejection import Rejection

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from typing import TextIO

    from tanglestat.domain.model.node import Node

logger = logging.getLogger(__name__)

# ASCII digits only: int() alone would accept "-1", "1_0" and non-ASCII digits
_UNSIGNED = re.compile(r"\+?[0-9]+")

RECORD_TOKENS = 3


def parse(stream: TextIO, *, source: str = "<stream>") -> Ledger:
    """Parse ledger text to Ledger.

    Args:
        stream: Text stream: header line, then N record lines.
        source: Name used in error messages.

    Returns:
        Ledger with exactly N nodes, origin excluded.

    Raises:
        MissingHeaderError: Empty stream or blank header.
        HeaderParseError: Header is not an unsigned integer.
        UnexpectedEndOfInputError: Fewer than N record lines.
        MalformedRecordError: Record line ends before 3 valid tokens.
        TrailingContentError: Non-blank line after N records.
        LedgerReadError: Undecodable bytes or I/O failure.
    """
    lines = enumerate(_read_lines(stream, source), start=1)

    header = next(lines, (1, ""))[1].strip()
    if not header:
        raise MissingHeaderError
    count = _parse_count(header)

    nodes: list[Node] = [ORIGIN]
    rejections: list[Rejection] = []
    for record in range(1, count + 1):
        entry = next(lines, None)
        if entry is None:
            raise UnexpectedEndOfInputError(expected=count, found=record - 1)
        line_number, line = entry

        try:
            node = parse_record(line, nodes, line_number=line_number)
        except RecordRejected as signal:
            logger.debug("%s:%d: record %d rejected: %s", source, line_number, record, signal)
            nodes.append(INVALID)
            rejections.append(Rejection(record=record, reason=signal.reason))
        else:
            nodes.append(node)

    for line_number, line in lines:
        if line.strip():
            raise TrailingContentError(line.strip(), line=line_number)

    ledger = Ledger(nodes=tuple(nodes[1:]), rejections=tuple(rejections))
    logger.info(
        "parsed %s: %d records, %d valid, %d invalid",
        source,
        len(ledger),
        ledger.valid_count,
        ledger.invalid_count,
    )
    return ledger


def parse_text(text: str) -> Ledger:
    """Parse ledger from in-memory text."""
    return parse(io.StringIO(text), source="<text>")


def parse_file(path: str | Path, *, encoding: str = "utf-8") -> Ledger:
    """Parse ledger file.

    Args:
        path: Ledger file.
        encoding: Text encoding, decoded strictly.

    Raises:
        LedgerReadError: File cannot be opened, read or decoded.
        LedgerFormatError: See parse().
    """
    path = Path(path)
    try:
        stream = path.open(encoding=encoding, errors="strict")
    except OSError as e:
        raise LedgerReadError(str(path), e.strerror or str(e)) from e
    except LookupError as e:
        raise LedgerReadError(str(path), str(e)) from e

    with stream:
        return parse(stream, source=str(path))


def parse_record(
    line: str,
    nodes: Sequence[Node],
    *,
    line_number: int | None = None,
) -> ValidNode:
    """Validate one record line against the records before it.

    Args:
        line: Record line "<left> <right> <timestamp>", refs 1-based.
        nodes: Internal sequence so far, origin at position 0.
        line_number: Input line for error messages.

    Returns:
        ValidNode with 0-based refs; a ref to an invalid record is None.

    Raises:
        RecordRejected: Record is invalid (local, recoverable).
        MalformedRecordError: Token missing after all earlier tokens parsed (fatal).
    """
    tokens = line.split()
    # Tokens are consumed in order: a bad token rejects before a missing one is noticed
    values: list[int] = []
    for index in range(RECORD_TOKENS):
        if index >= len(tokens):
            raise MalformedRecordError(line.strip(), line=line_number)
        values.append(_parse_unsigned(tokens[index]))
    left, right, timestamp = values

    if left == 0 or right == 0:
        raise RecordRejected(RejectReason.ZERO_NODE)

    left -= 1
    right -= 1

    # One slot past the record being parsed is still accepted
    bound = len(nodes) + 1
    if left > bound or right > bound:
        raise RecordRejected(RejectReason.FUTURE_REF)
    if left == bound and right == bound:
        raise RecordRejected(RejectReason.SELF_REF)

    if _precedes(timestamp, left, nodes) or _precedes(timestamp, right, nodes):
        raise RecordRejected(RejectReason.INVALID_TIMESTAMP)

    resolved_left = _resolve(left, nodes)
    resolved_right = _resolve(right, nodes)
    if resolved_left is None and resolved_right is None:
        raise RecordRejected(RejectReason.NO_VALID_REF)

    return ValidNode(left=resolved_left, right=resolved_right, timestamp=timestamp)


def _read_lines(stream: TextIO, source: str) -> Iterator[str]:
    """Yield raw lines, wrapping decode and I/O failures."""
    while True:
        try:
            line = stream.readline()
        except (UnicodeDecodeError, OSError) as e:
            raise LedgerReadError(source, str(e)) from e
        if not line:
            return
        yield line


def _parse_count(token: str) -> int:
    """Parse header record count."""
    if not _UNSIGNED.fullmatch(token):
        raise HeaderParseError(token)
    count = int(token)
    if count > U64_MAX:
        raise HeaderParseError(token)
    return count


def _parse_unsigned(token: str) -> int:
    """Parse unsigned 64-bit record token."""
    if not _UNSIGNED.fullmatch(token):
        raise RecordRejected(RejectReason.PARSE_ERROR)
    value = int(token)
    if value > U64_MAX:
        raise RecordRejected(RejectReason.PARSE_ERROR)
    return value


def _precedes(timestamp: int, position: int, nodes: Sequence[Node]) -> bool:
    """Check if timestamp is earlier than an existing valid record's."""
    if position >= len(nodes):
        return False
    match nodes[position]:
        case ValidNode(timestamp=approved):
            return timestamp < approved
        case _:
            return False


def _resolve(position: int, nodes: Sequence[Node]) -> int | None:
    """Resolve ref: None for an existing invalid record, else the position."""
    if position < len(nodes) and isinstance(nodes[position], InvalidNode):
        return None
    return position
