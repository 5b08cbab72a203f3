"""Normalization steps shared by visualization resolvers.

Each step returns a ``Step`` holding the (possibly new) value and whether it
differs from the input, so a resolver can tell "ready as is" from "usable
after an automatic adjustment" by OR-ing the flags.
"""
from __future__ import annotations

from typing import Any, List, NamedTuple, Optional, Tuple

from split_resolution.models.data_cube import DataCube, Dimension
from split_resolution.models.split import Split, SplitSet
from split_resolution.models.values import ColorEncoding, SortSpec
from split_resolution.models.verdict import Adjustment, Suggestion


class Step(NamedTuple):
    value: Any
    changed: bool


def any_changed(*steps: Step) -> bool:
    return any(step.changed for step in steps)


def preferred_sort(dimension: Dimension, *, honor_strategy: bool = True) -> SortSpec:
    """Ascending sort on the dimension itself, or on its declared sort strategy."""
    strategy = dimension.sort_strategy
    if honor_strategy and strategy and strategy != "self":
        return SortSpec.ascending(strategy)
    return SortSpec.ascending(dimension.name)


def normalize_sort(split: Split, sort: SortSpec) -> Step:
    if split.sort == sort:
        return Step(split, False)
    return Step(split.with_sort(sort), True)


def clear_time_limit(split: Split, dimension: Dimension) -> Step:
    # time buckets are enumerated in full, a top-N cap does not apply
    if split.limit is not None and dimension.kind == "time":
        return Step(split.with_limit(None), True)
    return Step(split, False)


def ensure_sort(split: Split, default: SortSpec) -> Step:
    if split.sort is None:
        return Step(split.with_sort(default), True)
    return Step(split, False)


def ensure_color(colors: Optional[ColorEncoding], dimension: Dimension, limit: int) -> Step:
    if colors is None or colors.dimension != dimension.name:
        return Step(ColorEncoding.from_limit(dimension.name, limit), True)
    return Step(colors, False)


def choose_primary(
    splits: SplitSet,
    data_cube: DataCube,
    colors: Optional[ColorEncoding] = None,
) -> Tuple[Split, Split]:
    """Pick the (primary, color) roles for a two-split configuration.

    The only bucketed split is primary. When both are bucketed, a single
    time-typed split wins. Remaining ties go against the split the color
    encoding already names, then to the first one given.
    """
    first, second = splits.get(0), splits.get(1)
    if first.is_bucketed != second.is_bucketed:
        return (first, second) if first.is_bucketed else (second, first)

    first_dim, second_dim = first.get_dimension(data_cube), second.get_dimension(data_cube)
    first_time, second_time = first_dim.kind == "time", second_dim.kind == "time"
    if first_time != second_time:
        return (first, second) if first_time else (second, first)

    if colors is not None:
        first_colored = first_dim.name == colors.dimension
        second_colored = second_dim.name == colors.dimension
        if first_colored != second_colored:
            return (second, first) if first_colored else (first, second)

    return first, second


def bucketable_dimensions(data_cube: DataCube) -> List[Dimension]:
    return data_cube.bucketable_dimensions()


def dimension_suggestions(data_cube: DataCube, description: str) -> Tuple[Suggestion, ...]:
    """One single-split suggestion per bucketable dimension.

    ``description`` is a format string receiving ``title``.
    """
    return tuple(
        Suggestion(
            description=description.format(title=dimension.title),
            adjustment=Adjustment(splits=SplitSet.from_split(Split.from_dimension(dimension))),
        )
        for dimension in bucketable_dimensions(data_cube)
    )
