from __future__ import annotations

import pytest

from split_resolution.config import scoring_config
from split_resolution.config.scoring_config import LineChartScoring, load_line_chart_scoring
from split_resolution.errors import ConfigurationError


def test_defaults_match_line_chart_weights() -> None:
    scoring = LineChartScoring()

    assert scoring.manual_score == 3
    assert (scoring.single_base, scoring.single_bucket_bonus, scoring.single_time_bonus) == (5, 2, 3)
    assert (scoring.pair_base, scoring.pair_bucket_bonus, scoring.pair_time_bonus) == (4, 2, 2)
    assert scoring.active_score == 10
    assert scoring.color_limit == 5


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("LINE_CHART_COLOR_LIMIT", "8")
    monkeypatch.setenv("LINE_CHART_PAIR_READY_BONUS", "0")
    monkeypatch.setenv("LINE_CHART_SINGLE_BASE", "not-a-number")

    scoring = load_line_chart_scoring()

    assert scoring.color_limit == 8
    assert scoring.pair_ready_bonus == 0
    assert scoring.single_base == 5


def test_invalid_values_raise(monkeypatch) -> None:
    monkeypatch.setenv("LINE_CHART_MANUAL_SCORE", "-1")
    with pytest.raises(ConfigurationError, match="manual_score"):
        load_line_chart_scoring()

    with pytest.raises(ConfigurationError):
        LineChartScoring(color_limit=0).validate()


def test_get_scoring_is_cached(monkeypatch) -> None:
    scoring_config.reset_scoring_cache()
    monkeypatch.setenv("LINE_CHART_ACTIVE_SCORE", "9")
    first = scoring_config.get_line_chart_scoring()
    monkeypatch.setenv("LINE_CHART_ACTIVE_SCORE", "7")

    assert scoring_config.get_line_chart_scoring() is first
    assert first.active_score == 9

    scoring_config.reset_scoring_cache()
    assert scoring_config.get_line_chart_scoring().active_score == 7
    scoring_config.reset_scoring_cache()
