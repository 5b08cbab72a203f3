"""Line chart resolution rules.

A line chart needs exactly one continuous (bucketed) split for its axis,
optionally with a second split that becomes the color series.
"""
from __future__ import annotations

from functools import partial
from typing import Optional

from split_resolution.config.scoring_config import LineChartScoring, get_line_chart_scoring
from split_resolution.engine.manifest import Manifest
from split_resolution.engine.normalization import (
    any_changed,
    choose_primary,
    clear_time_limit,
    dimension_suggestions,
    ensure_color,
    ensure_sort,
    normalize_sort,
    preferred_sort,
)
from split_resolution.engine.rule_table import Rule, RuleTable
from split_resolution.models.data_cube import DataCube
from split_resolution.models.split import Split, SplitSet
from split_resolution.models.values import ColorEncoding
from split_resolution.models.verdict import Adjustment, Automatic, Manual, Never, Ready, Suggestion, Verdict

MSG_REQUIRES_CONTINUOUS = "This visualization requires a continuous dimension split"
MSG_TOO_MANY_SPLITS = "Too many splits on the line chart"
MSG_NEEDS_BUCKETED = "The Line Chart needs one bucketed split"


# Predicates: (splits, data_cube) -> bool

def has_no_bucketable_dimension(splits: SplitSet, data_cube: DataCube) -> bool:
    return not data_cube.bucketable_dimensions()


def has_no_splits(splits: SplitSet, data_cube: DataCube) -> bool:
    return splits.has_length(0)


def is_single_bucketed_split(splits: SplitSet, data_cube: DataCube) -> bool:
    return splits.has_length(1) and splits.first().is_bucketed


def is_two_splits_one_bucketed(splits: SplitSet, data_cube: DataCube) -> bool:
    return splits.has_length(2) and splits.any_bucketed()


def has_bucketed_split(splits: SplitSet, data_cube: DataCube) -> bool:
    return splits.any_bucketed()


# Resolvers: (splits, data_cube, colors, is_active) -> Verdict

def resolve_never(
    splits: SplitSet,
    data_cube: DataCube,
    colors: Optional[ColorEncoding],
    is_active: bool,
) -> Verdict:
    return Never()


def resolve_no_splits(
    splits: SplitSet,
    data_cube: DataCube,
    colors: Optional[ColorEncoding],
    is_active: bool,
    *,
    scoring: LineChartScoring,
) -> Verdict:
    return Manual(
        score=scoring.manual_score,
        message=MSG_REQUIRES_CONTINUOUS,
        suggestions=dimension_suggestions(data_cube, "Add a split on {title}"),
    )


def resolve_single_split(
    splits: SplitSet,
    data_cube: DataCube,
    colors: Optional[ColorEncoding],
    is_active: bool,
    *,
    scoring: LineChartScoring,
) -> Verdict:
    split = splits.first()
    dimension = split.get_dimension(data_cube)

    sorted_step = normalize_sort(split, preferred_sort(dimension))
    limit_step = clear_time_limit(sorted_step.value, dimension)
    # single-split line charts draw one series, any color encoding is dropped
    auto_changed = any_changed(sorted_step, limit_step) or colors is not None

    score = scoring.single_base
    if split.can_bucket_by_default(data_cube):
        score += scoring.single_bucket_bonus
    if dimension.kind == "time":
        score += scoring.single_time_bonus
    if is_active:
        score = scoring.active_score

    if not auto_changed:
        if score < scoring.max_score:
            score = min(score + scoring.single_ready_bonus, scoring.max_score)
        return Ready(score=score)
    return Automatic(score=score, adjustment=Adjustment(splits=SplitSet.from_split(limit_step.value)))


def resolve_two_splits(
    splits: SplitSet,
    data_cube: DataCube,
    colors: Optional[ColorEncoding],
    is_active: bool,
    *,
    scoring: LineChartScoring,
) -> Verdict:
    primary, color = choose_primary(splits, data_cube, colors)
    primary_dimension = primary.get_dimension(data_cube)
    color_dimension = color.get_dimension(data_cube)

    sorted_step = normalize_sort(primary, preferred_sort(primary_dimension, honor_strategy=False))
    limit_step = clear_time_limit(sorted_step.value, primary_dimension)
    color_sort_step = ensure_sort(color, data_cube.get_default_sort())
    colors_step = ensure_color(colors, color_dimension, scoring.color_limit)
    auto_changed = any_changed(sorted_step, limit_step, color_sort_step, colors_step)

    score = scoring.pair_base
    if primary_dimension.can_bucket_by_default():
        score += scoring.pair_bucket_bonus
    if primary_dimension.kind == "time":
        score += scoring.pair_time_bonus

    if not auto_changed:
        return Ready(score=score + scoring.pair_ready_bonus)
    # the rendering layer expects the color split first and the axis split last
    return Automatic(
        score=score,
        adjustment=Adjustment(
            splits=SplitSet.of(color_sort_step.value, limit_step.value),
            colors=colors_step.value,
        ),
    )


def resolve_too_many_splits(
    splits: SplitSet,
    data_cube: DataCube,
    colors: Optional[ColorEncoding],
    is_active: bool,
    *,
    scoring: LineChartScoring,
) -> Verdict:
    first_bucketed: Split = splits.bucketed()[0]
    return Manual(
        score=scoring.manual_score,
        message=MSG_TOO_MANY_SPLITS,
        suggestions=(
            Suggestion(
                description="Remove all but the first bucketed split",
                adjustment=Adjustment(splits=SplitSet.from_split(first_bucketed)),
            ),
        ),
    )


def resolve_needs_bucketed_split(
    splits: SplitSet,
    data_cube: DataCube,
    colors: Optional[ColorEncoding],
    is_active: bool,
    *,
    scoring: LineChartScoring,
) -> Verdict:
    return Manual(
        score=scoring.manual_score,
        message=MSG_NEEDS_BUCKETED,
        suggestions=dimension_suggestions(data_cube, "Split on {title} instead"),
    )


def build_line_chart_rule_table(scoring: Optional[LineChartScoring] = None) -> RuleTable:
    # order matters: each rule assumes every earlier one did not match
    scoring = (scoring or get_line_chart_scoring()).validate()
    return RuleTable(
        [
            Rule("no_bucketable_dimension", has_no_bucketable_dimension, resolve_never),
            Rule("no_splits", has_no_splits, partial(resolve_no_splits, scoring=scoring)),
            Rule("single_bucketed_split", is_single_bucketed_split, partial(resolve_single_split, scoring=scoring)),
            Rule("two_splits_one_bucketed", is_two_splits_one_bucketed, partial(resolve_two_splits, scoring=scoring)),
            Rule("too_many_splits", has_bucketed_split, partial(resolve_too_many_splits, scoring=scoring)),
        ],
        otherwise=partial(resolve_needs_bucketed_split, scoring=scoring),
    )


LINE_CHART_MANIFEST = Manifest("line-chart", "Line Chart", build_line_chart_rule_table())
