"""Reporters for ledger analysis results.

PlainTextReporter and JsonReporter use stdlib only.
ConsoleReporter renders with rich.
"""

from __future__ import annotations

from tanglestat.application.reporters.console import ConsoleReporter
from tanglestat.application.reporters.json_reporter import JsonReporter
from tanglestat.application.reporters.plain_text import PlainTextReporter, format_stats
from tanglestat.application.reporters.protocol import ReporterProtocol
from tanglestat.domain.model.configuration import AnalysisConfig
from tanglestat.domain.model.enums import OutputFormat


def get_reporter(config: AnalysisConfig | None = None) -> ReporterProtocol:
    """Create reporter for configured output format.

    Args:
        config: Analysis configuration. Uses defaults if None.

    Returns:
        Reporter instance.
    """
    config = config or AnalysisConfig()
    match config.output_format:
        case OutputFormat.TEXT:
            return PlainTextReporter()
        case OutputFormat.CONSOLE:
            return ConsoleReporter(config)
        case OutputFormat.JSON:
            return JsonReporter(show_rejections=config.show_rejections)


__all__ = [
    "ConsoleReporter",
    "JsonReporter",
    "PlainTextReporter",
    "ReporterProtocol",
    "format_stats",
    "get_reporter",
]
