"""a11ylint evaluation engine."""
from __future__ import annotations

import logging
from datetime import datetime, timezone

from a11ylint.config import A11yLintConfig
from a11ylint.dom import Document
from a11ylint.models import InvalidDocumentError, PassResult, Report, Rule, RuleContext, RuleResult
from a11ylint.rules import load_rules
from a11ylint.shaper import shape_report

logger = logging.getLogger("a11ylint")


class Engine:
    """Runs rules over one document at a time and assembles the report.

    Holds no per-document state, so one engine can audit many documents.
    """

    def __init__(self, config: A11yLintConfig, rules: list[Rule]):
        self.config = config
        self.rules = rules

    def active_rules(self) -> list[Rule]:
        active: list[Rule] = []
        seen: set[str] = set()
        for rule in self.rules:
            if rule.pack not in self.config.packs:
                continue
            if not self.config.is_rule_enabled(rule.id):
                continue
            if rule.id in seen:
                logger.warning("Duplicate rule id %s, evaluating once", rule.id)
                continue
            seen.add(rule.id)
            active.append(rule)
        return active

    def audit(
        self,
        document: Document | None,
        source: str | None = None,
        timestamp: datetime | None = None,
    ) -> Report:
        """Evaluate all active rules against ``document``."""
        if document is None or getattr(document, "root", None) is None:
            raise InvalidDocumentError("Cannot audit a document without a root element")

        violations: list[RuleResult] = []
        passes: list[PassResult] = []

        for rule in self.active_rules():
            context = RuleContext(document=document, config=self.config.get_rule_config(rule.id))
            try:
                outcome = rule.evaluate(context)
            except Exception:
                logger.exception("Rule %s raised an exception", rule.id)
                continue

            if outcome.findings:
                if not self.config.is_rule_surfaced(rule.id, rule.surfaced):
                    logger.debug("Rule %s found %d issue(s), not surfaced", rule.id, len(outcome.findings))
                    continue
                violations.append(rule.to_result(outcome.findings))
            elif outcome.applicable and rule.emits_pass:
                passes.append(rule.to_pass())

        report = Report(
            url=document.source if source is None else source,
            violations=tuple(violations),
            passes=tuple(passes),
            incomplete=(),
            timestamp=timestamp or datetime.now(timezone.utc),
        )
        logger.info("Audited %s: %d violation(s), %d pass(es)",
                    report.url or "<document>", len(violations), len(passes))
        return shape_report(report, self.config.max_nodes)


def audit_document(
    document: Document | None,
    config: A11yLintConfig | None = None,
    source: str | None = None,
    timestamp: datetime | None = None,
) -> Report:
    config = config or A11yLintConfig()
    return Engine(config, load_rules(config.packs)).audit(document, source=source, timestamp=timestamp)


def audit_html(
    html: str,
    source: str = "",
    config: A11yLintConfig | None = None,
    timestamp: datetime | None = None,
) -> Report:
    """Parse ``html`` and audit it with the configured rules."""
    document = Document.from_html(html, source=source)
    return audit_document(document, config=config, timestamp=timestamp)
