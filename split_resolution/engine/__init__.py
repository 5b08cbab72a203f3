from .line_chart import LINE_CHART_MANIFEST, build_line_chart_rule_table
from .manifest import Manifest, rank_manifests
from .rule_table import OTHERWISE, Rule, RuleTable

__all__ = [
    "LINE_CHART_MANIFEST",
    "OTHERWISE",
    "Manifest",
    "Rule",
    "RuleTable",
    "build_line_chart_rule_table",
    "rank_manifests",
]
