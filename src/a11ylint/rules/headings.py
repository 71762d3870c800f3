"""Rules: heading structure (WCAG 1.3.1, 2.4.6)."""
from __future__ import annotations

from a11ylint.locator import ElementRef, locate
from a11ylint.models import Impact, Rule, RuleContext, RuleOutcome
from a11ylint.rules._helpers import axe_url


def _level(tag: str) -> int:
    return int(tag[1])


class PageHasHeadingOne(Rule):
    """Every page needs at least one ``<h1>``."""

    id = "page-has-heading-one"
    description = "Page should contain a level-one heading"
    help = "Page should contain a level-one heading"
    help_url = axe_url("page-has-heading-one")
    impact = Impact.MODERATE
    tags = ("best-practice", "cat.semantics")
    pack = "extended"
    emits_pass = True
    pass_description = "Page has a level-one heading"

    def evaluate(self, context: RuleContext) -> RuleOutcome:
        if context.document.find("h1") is not None:
            return RuleOutcome(applicable=True)
        ref = ElementRef.opening_tag(context.document.root, selector="html")
        return RuleOutcome(
            findings=[ref.finding("Page does not contain an <h1> element")],
            applicable=True,
        )


class MultipleH1(Rule):
    """Only one ``<h1>`` per page; every one after the first is flagged."""

    id = "multiple-h1"
    description = "Page should contain only one level-one heading"
    help = "Page should not contain more than one level-one heading"
    help_url = axe_url("page-has-heading-one")
    impact = Impact.MODERATE
    tags = ("best-practice", "cat.semantics")
    pack = "extended"

    def evaluate(self, context: RuleContext) -> RuleOutcome:
        h1s = context.document.find_all("h1")
        findings = [
            locate(h1, index, f"Page contains {len(h1s)} <h1> elements")
            for index, h1 in enumerate(h1s, start=1)
            if index > 1
        ]
        return RuleOutcome(findings=findings, applicable=bool(h1s))


class HeadingOrder(Rule):
    """Heading levels only increase by one.

    Each heading is compared with the one immediately before it; a drop in
    level is always fine.
    """

    id = "heading-order"
    description = "Heading levels should only increase by one"
    help = "Heading levels should only increase by one"
    help_url = axe_url("heading-order")
    impact = Impact.MODERATE
    tags = ("wcag2a", "wcag131", "cat.semantics")
    pack = "core"
    emits_pass = True
    pass_description = "Heading levels increase by one"

    def evaluate(self, context: RuleContext) -> RuleOutcome:
        headings = context.document.headings()
        findings = []
        for index in range(1, len(headings)):
            previous = _level(headings[index - 1].tag)
            current = _level(headings[index].tag)
            if current > previous + 1:
                findings.append(locate(
                    headings[index], index + 1,
                    f"Heading level skips from h{previous} to h{current}",
                ))
        return RuleOutcome(findings=findings, applicable=bool(headings))


class EmptyHeading(Rule):
    """Headings must contain visible text."""

    id = "empty-heading"
    description = "Headings should not be empty"
    help = "Headings must have discernible text"
    help_url = axe_url("empty-heading")
    impact = Impact.MINOR
    tags = ("best-practice", "cat.name-role-value")
    pack = "extended"

    def evaluate(self, context: RuleContext) -> RuleOutcome:
        headings = context.document.headings()
        findings = [
            locate(heading, index, "Heading does not have text content")
            for index, heading in enumerate(headings, start=1)
            if not heading.text.strip()
        ]
        return RuleOutcome(findings=findings, applicable=bool(headings))
