"""Parsing exceptions.

Fatal errors abort the whole parse. RecordRejected is a local signal:
the parser recovers from it by marking the record invalid.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tanglestat.domain.exceptions.base import TangleStatError, TangleStatSignal

if TYPE_CHECKING:
    from tanglestat.domain.model.enums import RejectReason


class LedgerFormatError(TangleStatError, ValueError):
    """Input does not follow the ledger text format.

    Inherits ValueError for semantic correctness (bad input value).

    Attributes:
        line: 1-based input line where the error was found (None if unknown)
        reason: Why the input is malformed
    """

    def __init__(self, reason: str, *, line: int | None = None) -> None:
        # FAIL-FIRST: validate required parameters
        if not reason:
            raise ValueError("reason must be non-empty string")
        if line is not None and line < 1:
            raise ValueError(f"line must be >= 1, got {line}")

        self.line = line
        self.reason = reason
        prefix = f"line {line}: " if line is not None else ""
        super().__init__(f"{prefix}{reason}")


class MissingHeaderError(LedgerFormatError):
    """Record count header is absent or blank."""

    def __init__(self) -> None:
        """Initialize with fixed message."""
        super().__init__("missing record count header", line=1)


class HeaderParseError(LedgerFormatError):
    """Record count header is not an unsigned integer.

    Attributes:
        token: Header text as read (stripped)
    """

    def __init__(self, token: str) -> None:
        """Initialize with offending header text."""
        self.token = token
        super().__init__(f"invalid record count {token!r}", line=1)


class UnexpectedEndOfInputError(LedgerFormatError):
    """Stream ended before all declared records were read.

    Attributes:
        expected: Declared record count
        found: Records actually read
    """

    def __init__(self, expected: int, found: int) -> None:
        """Initialize with declared and actual record counts."""
        self.expected = expected
        self.found = found
        super().__init__(f"unexpected end of input: expected {expected} records, found {found}")


class MalformedRecordError(LedgerFormatError):
    """Record line ends before three tokens, all earlier tokens valid.

    Attributes:
        text: Offending line (stripped)
    """

    def __init__(self, text: str, *, line: int | None = None) -> None:
        """Initialize with offending text and optional line number."""
        self.text = text
        super().__init__(f"expected 3 tokens, got {len(text.split())}: {text!r}", line=line)


class TrailingContentError(LedgerFormatError):
    """Non-blank content after the declared records.

    Attributes:
        text: First offending line (stripped)
    """

    def __init__(self, text: str, *, line: int | None = None) -> None:
        """Initialize with offending text and optional line number."""
        self.text = text
        super().__init__(f"expected end of input, got {text!r}", line=line)


class LedgerReadError(TangleStatError, OSError):
    """Ledger source could not be read or decoded.

    Inherits OSError for semantic correctness (I/O failure).

    Attributes:
        source: File name or stream description
        reason: Underlying failure
    """

    def __init__(self, source: str, reason: str) -> None:
        """Initialize with source and reason."""
        self.source = source
        self.reason = reason
        super().__init__(f"failed to read {source}: {reason}")


class RecordRejected(TangleStatSignal):
    """Signal that a single record failed validation.

    Raised by parse_record(), caught by parse(). NOT an error: the record
    becomes invalid and parsing continues.

    Attributes:
        reason: Why the record was rejected
    """

    def __init__(self, reason: RejectReason) -> None:
        """Initialize with reject reason."""
        self.reason = reason
        super().__init__(reason.description)
