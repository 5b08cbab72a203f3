"""Decide whether a visualization can render a split configuration."""
from .engine import LINE_CHART_MANIFEST, Manifest, Rule, RuleTable, build_line_chart_rule_table, rank_manifests
from .errors import ConfigurationError, ContractViolation, ResolutionError

__all__ = [
    "LINE_CHART_MANIFEST",
    "ConfigurationError",
    "ContractViolation",
    "Manifest",
    "ResolutionError",
    "Rule",
    "RuleTable",
    "build_line_chart_rule_table",
    "rank_manifests",
]
