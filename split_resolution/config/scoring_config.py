"""Scoring constants for visualization resolvers, overridable from the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path

from dotenv import load_dotenv

from split_resolution.errors import ConfigurationError

# Load project-level .env regardless of current working directory.
_DOTENV_PATH = Path(__file__).resolve().parents[2] / ".env"
load_dotenv(_DOTENV_PATH)

_ENV_PREFIX = "LINE_CHART_"


def _env_int(name: str, default: int) -> int:
    raw = str(os.getenv(name, "")).strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class LineChartScoring:
    # Manual verdicts (no splits, too many splits, no bucketed split)
    manual_score: int = 3

    # One bucketed split
    single_base: int = 5
    single_bucket_bonus: int = 2
    single_time_bonus: int = 3
    active_score: int = 10
    single_ready_bonus: int = 2
    max_score: int = 10

    # Two splits
    pair_base: int = 4
    pair_bucket_bonus: int = 2
    pair_time_bonus: int = 2
    pair_ready_bonus: int = 2
    color_limit: int = 5

    def validate(self) -> "LineChartScoring":
        negative = [f.name for f in fields(self) if getattr(self, f.name) < 0]
        if negative:
            raise ConfigurationError(f"Scoring values must be >= 0: {', '.join(negative)}")
        if self.color_limit < 1:
            raise ConfigurationError("color_limit must be >= 1")
        return self


def load_line_chart_scoring() -> LineChartScoring:
    defaults = LineChartScoring()
    values = {
        f.name: _env_int(f"{_ENV_PREFIX}{f.name.upper()}", getattr(defaults, f.name))
        for f in fields(LineChartScoring)
    }
    return LineChartScoring(**values).validate()


_SCORING: LineChartScoring | None = None


def get_line_chart_scoring() -> LineChartScoring:
    global _SCORING
    if _SCORING is None:
        _SCORING = load_line_chart_scoring()
    return _SCORING


def reset_scoring_cache() -> None:
    global _SCORING
    _SCORING = None
