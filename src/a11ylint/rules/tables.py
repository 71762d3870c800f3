"""Rules: data table structure (WCAG 1.3.1)."""
from __future__ import annotations

from a11ylint.locator import MAX_EXCERPT_LENGTH, locate
from a11ylint.models import Impact, Rule, RuleContext, RuleOutcome
from a11ylint.rules._helpers import understanding_url


class TableHeaders(Rule):
    """Data tables need at least one ``<th>``."""

    id = "table-headers"
    description = "Data tables must have header cells"
    help = "Tables must use <th> elements to identify headers"
    help_url = understanding_url("info-and-relationships")
    impact = Impact.SERIOUS
    tags = ("wcag2a", "wcag131", "cat.tables")
    pack = "extended"

    def evaluate(self, context: RuleContext) -> RuleOutcome:
        tables = context.document.find_all("table")
        findings = [
            locate(table, index, "Table does not have any <th> header cells", MAX_EXCERPT_LENGTH)
            for index, table in enumerate(tables, start=1)
            if not table.find_all("th")
        ]
        return RuleOutcome(findings=findings, applicable=bool(tables))


class TableCaption(Rule):
    """Tables should carry a ``<caption>`` child.

    Evaluated but not surfaced in reports unless the ``surface`` option is
    set for this rule.
    """

    id = "table-caption"
    description = "Data tables should have a caption"
    help = "Tables should have a <caption> element"
    help_url = understanding_url("info-and-relationships")
    impact = Impact.MINOR
    tags = ("best-practice", "cat.tables")
    pack = "extended"
    surfaced = False

    def evaluate(self, context: RuleContext) -> RuleOutcome:
        tables = context.document.find_all("table")
        findings = [
            locate(table, index, "Table does not have a <caption> element", MAX_EXCERPT_LENGTH)
            for index, table in enumerate(tables, start=1)
            if not any(child.tag == "caption" for child in table.children())
        ]
        return RuleOutcome(findings=findings, applicable=bool(tables))
