from __future__ import annotations

import logging

import pytest

from split_resolution.engine.rule_table import OTHERWISE, Rule, RuleTable
from split_resolution.errors import ConfigurationError
from split_resolution.models import (
    Bucket,
    DataCube,
    Dimension,
    Manual,
    Never,
    Ready,
    Split,
    SplitSet,
)


def _cube() -> DataCube:
    return DataCube(
        dimensions=(Dimension(name="time", kind="time"), Dimension(name="page")),
        measures=("count",),
    )


def _manual(*_args) -> Manual:
    return Manual(score=3, message="fallback")


def _ready(score: int):
    def _resolver(*_args) -> Ready:
        return Ready(score=score)

    return _resolver


def test_missing_fallback_fails_at_build_time() -> None:
    with pytest.raises(ConfigurationError):
        RuleTable([Rule("any", lambda s, c: True, _ready(1))], otherwise=None)


def test_duplicate_rule_names_are_rejected() -> None:
    rules = [
        Rule("same", lambda s, c: False, _ready(1)),
        Rule("same", lambda s, c: True, _ready(2)),
    ]
    with pytest.raises(ConfigurationError, match="same"):
        RuleTable(rules, otherwise=_manual)


def test_otherwise_name_is_reserved() -> None:
    with pytest.raises(ConfigurationError):
        RuleTable([Rule(OTHERWISE, lambda s, c: True, _ready(1))], otherwise=_manual)


def test_first_matching_rule_wins() -> None:
    consulted: list[str] = []

    def _predicate(name: str, result: bool):
        def _check(splits, cube) -> bool:
            consulted.append(name)
            return result

        return _check

    table = RuleTable(
        [
            Rule("a", _predicate("a", False), _ready(1)),
            Rule("b", _predicate("b", True), _ready(2)),
            Rule("c", _predicate("c", True), _ready(3)),
        ],
        otherwise=_manual,
    )

    assert table.evaluate(SplitSet.empty(), _cube()) == Ready(score=2)
    assert consulted == ["a", "b"]


def test_fallback_runs_when_nothing_matches() -> None:
    table = RuleTable([Rule("never", lambda s, c: False, _ready(1))], otherwise=_manual)

    assert table.evaluate(SplitSet.empty(), _cube()) == Manual(score=3, message="fallback")
    assert table.match(SplitSet.empty(), _cube()) == OTHERWISE


def test_fallback_may_return_never() -> None:
    table = RuleTable([], otherwise=lambda *args: Never())

    assert table.evaluate(SplitSet.empty(), _cube()).is_never()


def test_fallback_returning_ready_is_a_configuration_error() -> None:
    table = RuleTable([], otherwise=_ready(5))

    with pytest.raises(ConfigurationError):
        table.evaluate(SplitSet.empty(), _cube())


def test_resolver_receives_all_inputs() -> None:
    received = {}

    def _resolver(splits, cube, colors, is_active):
        received.update(splits=splits, cube=cube, colors=colors, is_active=is_active)
        return Ready(score=1)

    splits = SplitSet.of(Split(expression="$time", bucket=Bucket(kind="time", granularity="PT1H")))
    cube = _cube()
    table = RuleTable([Rule("all", lambda s, c: True, _resolver)], otherwise=_manual)
    table.evaluate(splits, cube, None, True)

    assert received == {"splits": splits, "cube": cube, "colors": None, "is_active": True}


def test_predicate_errors_propagate() -> None:
    def _broken(splits, cube) -> bool:
        raise RuntimeError("boom")

    table = RuleTable([Rule("broken", _broken, _ready(1))], otherwise=_manual)

    with pytest.raises(RuntimeError, match="boom"):
        table.evaluate(SplitSet.empty(), _cube())


def test_match_is_logged_as_json_event(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="split_resolution")
    table = RuleTable([Rule("always", lambda s, c: True, _ready(4))], otherwise=_manual)

    table.evaluate(SplitSet.empty(), _cube())

    messages = [r.getMessage() for r in caplog.records if r.name == "split_resolution"]
    assert any('"event": "rule_table.matched"' in m and '"rule": "always"' in m for m in messages)
