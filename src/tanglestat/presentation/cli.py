"""Command line entry point.

Reads one ledger file, prints the report to stdout.
Fatal errors go to stderr with exit code 1, no report is printed.
"""

from __future__ import annotations

import argparse
import codecs
import logging
import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

from tanglestat import __version__
from tanglestat.application.reporters import get_reporter
from tanglestat.application.services import analyze, parse_file
from tanglestat.domain.exceptions import TangleStatError
from tanglestat.domain.model.configuration import MIN_WIDTH, AnalysisConfig
from tanglestat.domain.model.enums import OutputFormat

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

_VERBOSITY = ("WARNING", "INFO", "DEBUG")


def _encoding(value: str) -> str:
    """Argument type: known codec name."""
    if not value:
        raise argparse.ArgumentTypeError("encoding must not be empty")
    try:
        codecs.lookup(value)
    except LookupError as e:
        raise argparse.ArgumentTypeError(f"unknown encoding: {value!r}") from e
    return value


def _width(value: str) -> int:
    """Argument type: console width >= MIN_WIDTH."""
    try:
        width = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid width: {value!r}") from e
    if width < MIN_WIDTH:
        raise argparse.ArgumentTypeError(f"width must be >= {MIN_WIDTH}, got {width}")
    return width


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser."""
    parser = argparse.ArgumentParser(
        prog="tanglestat",
        description="Validate a DAG ledger file and report graph statistics",
    )
    parser.add_argument(
        "path",
        help="Ledger file: record count, then one '<left> <right> <timestamp>' line per record",
    )
    parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.TEXT.value,
        help="Report format (default: text)",
    )
    parser.add_argument(
        "--show-rejections",
        action="store_true",
        help="List rejected records (console and json formats)",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        type=_encoding,
        help="Ledger file encoding (default: utf-8)",
    )
    parser.add_argument(
        "--width",
        type=_width,
        default=100,
        help=f"Console report width, at least {MIN_WIDTH} (default: 100)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log to stderr (-v info, -vv debug)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> AnalysisConfig:
    """Build AnalysisConfig from parsed arguments."""
    return AnalysisConfig(
        encoding=args.encoding,
        output_format=OutputFormat(args.format),
        show_rejections=args.show_rejections,
        width=args.width,
        log_level=_VERBOSITY[min(args.verbose, len(_VERBOSITY) - 1)],
    )


def configure_logging(level: str) -> None:
    """Send package logs to stderr through rich. Idempotent."""
    package_logger = logging.getLogger("tanglestat")
    package_logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(handler)


def main(argv: Sequence[str] | None = None) -> int:
    """Run tanglestat.

    Args:
        argv: Arguments without program name. None = sys.argv[1:].

    Returns:
        Exit code: 0 on success, 1 on fatal error.
    """
    args = build_parser().parse_args(argv)
    config = config_from_args(args)
    configure_logging(config.log_level)

    try:
        ledger = parse_file(args.path, encoding=config.encoding)
    except TangleStatError as e:
        logger.debug("fatal error", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    result = analyze(ledger)
    print(get_reporter(config).report(result))
    return 0
