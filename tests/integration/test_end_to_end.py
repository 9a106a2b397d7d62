"""End-to-end tests: ledger file → report.

Runs the documented scenarios through parse_file() → analyze() → reporter,
and once through a real `python -m tanglestat` process.
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

from tanglestat.application.reporters import PlainTextReporter
from tanglestat.application.services import analyze, parse_file
from tanglestat.domain.exceptions import TangleStatError
from tests.factories import INVALIDS_LEDGER, SIMPLE_LEDGER

SRC_DIR = Path(__file__).resolve().parents[2] / "src"


def _report(tmp_path: Path, text: str) -> str:
    path = tmp_path / "ledger.txt"
    path.write_text(text, encoding="utf-8")
    return PlainTextReporter().report(analyze(parse_file(path)))


class TestScenarios:
    """Documented input → report scenarios."""

    def test_all_valid(self, tmp_path: Path) -> None:
        report = _report(tmp_path, SIMPLE_LEDGER)
        assert "AVG DAG DEPTH: 1.333" in report
        assert "PCT VALID: 100.0%" in report
        assert "AVG TX RATE: 1.250" in report

    def test_some_invalid(self, tmp_path: Path) -> None:
        report = _report(tmp_path, INVALIDS_LEDGER)
        assert "AVG DAG DEPTH: 1.500" in report
        assert "PCT VALID: 60.0%" in report

    def test_empty_ledger(self, tmp_path: Path) -> None:
        report = _report(tmp_path, "0")
        assert report.splitlines()[3] == "PCT VALID: 100.0%"

    def test_all_invalid(self, tmp_path: Path) -> None:
        report = _report(tmp_path, "2\n0 0 0\n5 5 5\n")
        assert "PCT VALID: 0.0%" in report
        assert "AVG REFS: 0.000" in report

    @pytest.mark.parametrize(
        "text",
        ["0\n1 1 0", "1", "", "abc\n", "2\n1 1 0\n1 1\n"],
    )
    def test_fatal_inputs(self, tmp_path: Path, text: str) -> None:
        with pytest.raises(TangleStatError):
            _report(tmp_path, text)


class TestProcess:
    """Tests for the `python -m tanglestat` process boundary."""

    def _run(self, *args: str) -> subprocess.CompletedProcess[str]:
        env = {**os.environ, "PYTHONPATH": str(SRC_DIR)}
        return subprocess.run(
            [sys.executable, "-m", "tanglestat", *args],
            capture_output=True,
            text=True,
            env=env,
            check=False,
        )

    def test_success(self, tmp_path: Path) -> None:
        path = tmp_path / "ledger.txt"
        path.write_text(SIMPLE_LEDGER, encoding="utf-8")
        proc = self._run(str(path))
        assert proc.returncode == 0
        assert proc.stdout.splitlines()[0] == "AVG DAG DEPTH: 1.333"

    def test_fatal_error_exit_code(self, tmp_path: Path) -> None:
        path = tmp_path / "ledger.txt"
        path.write_text("1", encoding="utf-8")
        proc = self._run(str(path))
        assert proc.returncode == 1
        assert proc.stdout == ""
        assert "unexpected end of input" in proc.stderr
