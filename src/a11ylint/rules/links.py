"""Rules: link names and link purpose (WCAG 2.4.4, 2.4.9, 4.1.2)."""
from __future__ import annotations

from a11ylint.locator import locate
from a11ylint.models import Impact, Rule, RuleContext, RuleOutcome
from a11ylint.rules._helpers import axe_url, link_text, links, understanding_url

_LOW_INFORMATION_TEXT = {"click here", "here", "more", "read more", "link", "continue"}


class LinkName(Rule):
    """Links need text content, aria-label or title."""

    id = "link-name"
    description = "Links must have discernible text"
    help = "Links must have discernible text"
    help_url = axe_url("link-name")
    impact = Impact.SERIOUS
    tags = ("wcag2a", "wcag244", "wcag412", "cat.name-role-value")
    pack = "core"
    emits_pass = True
    pass_description = "Links have discernible text"

    def evaluate(self, context: RuleContext) -> RuleOutcome:
        found = links(context.document)
        findings = [
            locate(link, index, "Link does not have accessible text")
            for index, link in enumerate(found, start=1)
            if not link_text(link)
        ]
        return RuleOutcome(findings=findings, applicable=bool(found))


class LinkTextQuality(Rule):
    """Link text like "click here" does not describe the destination."""

    id = "link-text-quality"
    description = "Link text should describe the link destination"
    help = "Links should not use generic text"
    help_url = understanding_url("link-purpose-in-context")
    impact = Impact.MODERATE
    tags = ("wcag2a", "wcag244", "cat.name-role-value")
    pack = "extended"

    def evaluate(self, context: RuleContext) -> RuleOutcome:
        findings = []
        applicable = False
        for index, link in enumerate(links(context.document), start=1):
            text = link_text(link)
            if not text:
                continue
            applicable = True
            if " ".join(text.lower().split()) in _LOW_INFORMATION_TEXT:
                findings.append(locate(link, index, f'Link text "{text}" is not descriptive'))
        return RuleOutcome(findings=findings, applicable=applicable)


class LinkSameTextDiffTarget(Rule):
    """Links sharing text must share a destination.

    The first link seen with a given text sets the expected href; later links
    with that text and another href are flagged.
    """

    id = "link-same-text-diff-target"
    description = "Links with the same text should point to the same destination"
    help = "Links with identical text must have the same purpose"
    help_url = understanding_url("link-purpose-link-only")
    impact = Impact.MINOR
    tags = ("wcag2aaa", "wcag249", "best-practice", "cat.semantics")
    pack = "extended"

    def evaluate(self, context: RuleContext) -> RuleOutcome:
        first_href: dict[str, str] = {}
        findings = []
        applicable = False
        for index, link in enumerate(links(context.document), start=1):
            text = link_text(link)
            if not text:
                continue
            applicable = True
            href = link.get("href") or ""
            if text not in first_href:
                first_href[text] = href
            elif first_href[text] != href:
                findings.append(locate(
                    link, index,
                    f'Link text "{text}" also points to "{first_href[text]}", not "{href}"',
                ))
        return RuleOutcome(findings=findings, applicable=applicable)
