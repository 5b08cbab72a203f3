"""Visualization manifests: a named rule table plus score-based ranking."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from split_resolution.engine.rule_table import RuleTable
from split_resolution.models.data_cube import DataCube
from split_resolution.models.split import SplitSet
from split_resolution.models.values import ColorEncoding
from split_resolution.models.verdict import Verdict


@dataclass(frozen=True)
class Manifest:
    name: str
    title: str
    rule_table: RuleTable

    def evaluate(
        self,
        splits: SplitSet,
        data_cube: DataCube,
        colors: Optional[ColorEncoding] = None,
        is_active: bool = False,
    ) -> Verdict:
        return self.rule_table.evaluate(splits, data_cube, colors, is_active)


def rank_manifests(
    manifests: Sequence[Manifest],
    splits: SplitSet,
    data_cube: DataCube,
    colors: Optional[ColorEncoding] = None,
    current: Optional[str] = None,
) -> List[Tuple[Manifest, Verdict]]:
    """Evaluate every manifest and order the applicable ones by score.

    ``current`` names the visualization being shown now, which is evaluated
    as active. ``Never`` verdicts are dropped; equal scores keep the given
    order.
    """
    results: List[Tuple[Manifest, Verdict]] = []
    for manifest in manifests:
        verdict = manifest.evaluate(splits, data_cube, colors, manifest.name == current)
        if verdict.is_never():
            continue
        results.append((manifest, verdict))
    return sorted(results, key=lambda item: -item[1].score)
