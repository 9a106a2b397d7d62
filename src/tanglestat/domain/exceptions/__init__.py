"""Domain exceptions."""

from tanglestat.domain.exceptions.base import TangleStatError, TangleStatSignal
from tanglestat.domain.exceptions.parsing import (
    HeaderParseError,
    LedgerFormatError,
    LedgerReadError,
    MalformedRecordError,
    MissingHeaderError,
    RecordRejected,
    TrailingContentError,
    UnexpectedEndOfInputError,
)

__all__ = [
    "TangleStatError",
    "TangleStatSignal",
    "LedgerFormatError",
    "MissingHeaderError",
    "HeaderParseError",
    "UnexpectedEndOfInputError",
    "MalformedRecordError",
    "TrailingContentError",
    "LedgerReadError",
    "RecordRejected",
]
