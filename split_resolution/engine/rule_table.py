"""Ordered first-match-wins rule table."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from split_resolution.errors import ConfigurationError
from split_resolution.models.data_cube import DataCube
from split_resolution.models.split import SplitSet
from split_resolution.models.values import ColorEncoding
from split_resolution.models.verdict import Manual, Never, Verdict
from split_resolution.utils.logging import log_event

Predicate = Callable[[SplitSet, DataCube], bool]
Resolver = Callable[[SplitSet, DataCube, Optional[ColorEncoding], bool], Verdict]

OTHERWISE = "otherwise"


@dataclass(frozen=True)
class Rule:
    name: str
    predicate: Predicate
    resolver: Resolver


class RuleTable:
    """Rules are tested in registration order; the first match resolves.

    ``otherwise`` runs when no predicate matches and must answer with a
    ``Manual`` or ``Never`` verdict.
    """

    def __init__(self, rules: Sequence[Rule], otherwise: Optional[Resolver]) -> None:
        if otherwise is None:
            raise ConfigurationError("rule table requires an otherwise resolver")

        names = [rule.name for rule in rules]
        duplicated = sorted({name for name in names if names.count(name) > 1})
        if duplicated:
            raise ConfigurationError(f"duplicate rule names: {', '.join(duplicated)}")
        if OTHERWISE in names:
            raise ConfigurationError(f"'{OTHERWISE}' is reserved for the fallback resolver")

        self._rules: Tuple[Rule, ...] = tuple(rules)
        self._otherwise: Resolver = otherwise

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return self._rules

    def _find(self, splits: SplitSet, data_cube: DataCube) -> Optional[Rule]:
        for rule in self._rules:
            if rule.predicate(splits, data_cube):
                return rule
        return None

    def match(self, splits: SplitSet, data_cube: DataCube) -> str:
        rule = self._find(splits, data_cube)
        return rule.name if rule else OTHERWISE

    def evaluate(
        self,
        splits: SplitSet,
        data_cube: DataCube,
        colors: Optional[ColorEncoding] = None,
        is_active: bool = False,
    ) -> Verdict:
        rule = self._find(splits, data_cube)
        if rule is not None:
            verdict = rule.resolver(splits, data_cube, colors, is_active)
            log_event(
                "rule_table.matched",
                {"rule": rule.name, "verdict": verdict.kind, "score": verdict.score},
                level="debug",
            )
            return verdict

        verdict = self._otherwise(splits, data_cube, colors, is_active)
        if not isinstance(verdict, (Manual, Never)):
            log_event("rule_table.fallback.invalid", {"verdict": verdict.kind}, level="error")
            raise ConfigurationError(
                f"otherwise resolver must return a manual or never verdict, got '{verdict.kind}'"
            )
        log_event(
            "rule_table.fallback",
            {"verdict": verdict.kind, "score": verdict.score, "split_count": splits.length()},
            level="debug",
        )
        return verdict
