"""Analysis configuration.

User-provided options for reading the ledger and rendering the report.
Built by the CLI, passed down to parse_file() and get_reporter().
"""

from __future__ import annotations

from dataclasses import dataclass

from tanglestat.domain.model.enums import OutputFormat

LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
MIN_WIDTH = 40


@dataclass(frozen=True, slots=True)
class AnalysisConfig:
    """Configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.
    All fields have defaults.

    Attributes:
        encoding: Text encoding of the ledger file (strict decoding)
        output_format: Report format
        show_rejections: Include per-record rejections (console, json)
        width: Console width for rich output (>= 40)
        log_level: Logging level name
    """

    encoding: str = "utf-8"
    output_format: OutputFormat = OutputFormat.TEXT
    show_rejections: bool = False
    width: int = 100
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.encoding:
            raise ValueError("encoding must not be empty")
        if not isinstance(self.output_format, OutputFormat):
            raise TypeError(
                f"output_format must be OutputFormat, got {type(self.output_format).__name__}"
            )
        if self.width < MIN_WIDTH:
            raise ValueError(f"width must be >= {MIN_WIDTH}, got {self.width}")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {sorted(LOG_LEVELS)}, got {self.log_level!r}"
            )
