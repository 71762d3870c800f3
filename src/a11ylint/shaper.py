"""Truncate reports before they leave the engine."""
from __future__ import annotations

from dataclasses import replace

from a11ylint.models import Report, RuleResult


def shape_result(result: RuleResult, max_nodes: int) -> RuleResult:
    """Keep the first ``max_nodes`` findings; remember the real count."""
    return replace(result, nodes=result.nodes[:max_nodes], total_nodes=result.node_count)


def shape_report(report: Report, max_nodes: int = 5) -> Report:
    return replace(
        report,
        violations=tuple(shape_result(v, max_nodes) for v in report.violations),
        incomplete=tuple(shape_result(i, max_nodes) for i in report.incomplete),
    )
