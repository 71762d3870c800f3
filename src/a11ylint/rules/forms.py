"""Rules: form controls without an accessible label (WCAG 1.3.1, 3.3.2, 4.1.2)."""
from __future__ import annotations

from a11ylint.locator import locate
from a11ylint.models import Impact, Rule, RuleContext, RuleOutcome
from a11ylint.rules._helpers import axe_url, filled, form_fields, has_label, label_targets, understanding_url


class Label(Rule):
    """Form controls need a ``<label for>``, aria-label or aria-labelledby."""

    id = "label"
    description = "Form elements must have labels"
    help = "Form elements must have labels"
    help_url = axe_url("label")
    impact = Impact.CRITICAL
    tags = ("wcag2a", "wcag412", "wcag131", "cat.forms")
    pack = "core"
    emits_pass = True
    pass_description = "Form elements have labels"

    def evaluate(self, context: RuleContext) -> RuleOutcome:
        fields = form_fields(context.document)
        targets = label_targets(context.document)
        findings = [
            locate(field, index, "Form element does not have an accessible label")
            for index, field in enumerate(fields, start=1)
            if not has_label(field, targets)
        ]
        return RuleOutcome(findings=findings, applicable=bool(fields))


class PlaceholderAsLabel(Rule):
    """Placeholder text disappears on input and is not a label."""

    id = "placeholder-as-label"
    description = "Placeholder text must not be used in place of a label"
    help = "Form elements should have a label in addition to placeholder text"
    help_url = understanding_url("labels-or-instructions")
    impact = Impact.MODERATE
    tags = ("wcag2a", "wcag332", "cat.forms")
    pack = "extended"

    def evaluate(self, context: RuleContext) -> RuleOutcome:
        fields = form_fields(context.document)
        targets = label_targets(context.document)
        findings = []
        for index, field in enumerate(fields, start=1):
            placeholder = filled(field.get("placeholder"))
            if placeholder and not has_label(field, targets):
                findings.append(locate(
                    field, index,
                    f'Placeholder "{placeholder}" is the only label for this form element',
                ))
        return RuleOutcome(findings=findings, applicable=bool(fields))
