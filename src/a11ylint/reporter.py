"""Output formatting for audit reports."""
from __future__ import annotations

import json

from a11ylint.models import Impact, Report


class Reporter:
    """Formats a report as JSON or a plain-text summary."""

    def __init__(self, report: Report):
        self.report = report

    def has_violations(self) -> bool:
        return bool(self.report.violations)

    def exit_code(self) -> int:
        """0 when the page is clean, 1 when any violation was reported."""
        return 1 if self.has_violations() else 0

    def format_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.report.to_dict(), indent=indent)

    def format_text(self) -> str:
        report = self.report
        lines = [
            f"Accessibility report for {report.url or '<document>'}",
            f"Violations: {len(report.violations)}  |  Passes: {len(report.passes)}  |  "
            f"Incomplete: {len(report.incomplete)}",
        ]

        # Most severe first; stable within an impact level
        ordered = sorted(
            report.violations,
            key=lambda v: list(Impact).index(v.impact),
            reverse=True,
        )
        if ordered:
            lines.append("")
            lines.append("Violations:")
            for v in ordered:
                lines.append(f"  [{v.id}] ({v.impact.value}) {v.help}")
                for node in v.nodes:
                    lines.append(f"    {', '.join(node.target)}: {node.failure_summary}")
                hidden = v.node_count - len(v.nodes)
                if hidden > 0:
                    lines.append(f"    ... and {hidden} more")

        if report.passes:
            lines.append("")
            lines.append("Passes:")
            for p in report.passes:
                lines.append(f"  [{p.id}] {p.description}")

        return "\n".join(lines)
