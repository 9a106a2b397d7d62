"""Tests for domain/model/stats.py, analysis_result.py and configuration.py."""

import pytest

from tanglestat.domain.model.analysis_result import AnalysisResult
from tanglestat.domain.model.configuration import AnalysisConfig
from tanglestat.domain.model.enums import OutputFormat
from tanglestat.domain.model.stats import Stats
from tests.factories import make_rejected_ledger, make_result, make_stats


class TestStats:
    """Tests for Stats."""

    def test_empty(self) -> None:
        stats = Stats.empty()
        assert stats.pct_valid == 100.0
        assert stats.avg_dag_depth == 0.0
        assert stats.avg_txs_per_depth == 0.0
        assert stats.avg_refs == 0.0
        assert stats.avg_tx_rate == 0.0

    def test_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="avg_refs must be >= 0"):
            make_stats(avg_refs=-0.5)

    def test_pct_over_100_raises(self) -> None:
        with pytest.raises(ValueError, match="pct_valid must be 0-100"):
            make_stats(pct_valid=100.1)


class TestAnalysisResult:
    """Tests for AnalysisResult."""

    def test_counts(self) -> None:
        result = make_result()
        assert result.record_count == 2
        assert result.valid_count == 1
        assert result.rejections == make_rejected_ledger().rejections

    def test_empty(self) -> None:
        result = AnalysisResult.empty()
        assert result.record_count == 0
        assert result.stats == Stats.empty()


class TestAnalysisConfig:
    """Tests for AnalysisConfig."""

    def test_default_values(self) -> None:
        config = AnalysisConfig()
        assert config.encoding == "utf-8"
        assert config.output_format == OutputFormat.TEXT
        assert config.show_rejections is False
        assert config.width == 100
        assert config.log_level == "WARNING"

    def test_custom_values(self) -> None:
        config = AnalysisConfig(
            encoding="latin-1",
            output_format=OutputFormat.JSON,
            show_rejections=True,
            width=80,
            log_level="DEBUG",
        )
        assert config.output_format == OutputFormat.JSON
        assert config.width == 80

    def test_empty_encoding_raises(self) -> None:
        with pytest.raises(ValueError, match="encoding"):
            AnalysisConfig(encoding="")

    def test_narrow_width_raises(self) -> None:
        with pytest.raises(ValueError, match="width must be >= 40"):
            AnalysisConfig(width=10)

    def test_unknown_log_level_raises(self) -> None:
        with pytest.raises(ValueError, match="log_level"):
            AnalysisConfig(log_level="LOUD")

    def test_output_format_type_checked(self) -> None:
        with pytest.raises(TypeError):
            AnalysisConfig(output_format="json")  # type: ignore[arg-type]
