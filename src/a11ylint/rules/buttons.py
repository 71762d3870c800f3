"""Rules: buttons without useful accessible text (WCAG 4.1.2, 2.4.6)."""
from __future__ import annotations

from a11ylint.locator import locate
from a11ylint.models import Impact, Rule, RuleContext, RuleOutcome
from a11ylint.rules._helpers import axe_url, button_text, buttons, understanding_url

_LOW_INFORMATION_TEXT = {"click", "here", "more", "link", "button"}


class ButtonName(Rule):
    """Buttons need text content, a value, aria-label or title."""

    id = "button-name"
    description = "Buttons must have discernible text"
    help = "Buttons must have discernible text"
    help_url = axe_url("button-name")
    impact = Impact.CRITICAL
    tags = ("wcag2a", "wcag412", "cat.name-role-value")
    pack = "core"
    emits_pass = True
    pass_description = "Buttons have discernible text"

    def evaluate(self, context: RuleContext) -> RuleOutcome:
        found = buttons(context.document)
        findings = [
            locate(button, index, "Button does not have accessible text")
            for index, button in enumerate(found, start=1)
            if not button_text(button)
        ]
        return RuleOutcome(findings=findings, applicable=bool(found))


class ButtonTextQuality(Rule):
    """Button text such as "click" says nothing about the action."""

    id = "button-text-quality"
    description = "Button text should describe the action it performs"
    help = "Buttons should not use generic text"
    help_url = understanding_url("headings-and-labels")
    impact = Impact.MINOR
    tags = ("wcag2aa", "wcag246", "best-practice", "cat.name-role-value")
    pack = "extended"

    def evaluate(self, context: RuleContext) -> RuleOutcome:
        findings = []
        applicable = False
        for index, button in enumerate(buttons(context.document), start=1):
            text = button_text(button)
            if not text:
                continue
            applicable = True
            if " ".join(text.lower().split()) in _LOW_INFORMATION_TEXT:
                findings.append(locate(button, index, f'Button text "{text}" is not descriptive'))
        return RuleOutcome(findings=findings, applicable=applicable)
