"""Rule: images without alt text (WCAG 1.1.1)."""
from __future__ import annotations

from a11ylint.locator import locate
from a11ylint.models import Impact, Rule, RuleContext, RuleOutcome
from a11ylint.rules._helpers import axe_url


class ImageAlt(Rule):
    """Images must carry an alt attribute; ``alt=""`` marks them decorative."""

    id = "image-alt"
    description = "Images must have alternative text"
    help = "Images must have alternate text"
    help_url = axe_url("image-alt")
    impact = Impact.CRITICAL
    tags = ("wcag2a", "wcag111", "cat.text-alternatives")
    pack = "core"
    emits_pass = True
    pass_description = "Images have alternative text"

    def evaluate(self, context: RuleContext) -> RuleOutcome:
        images = context.document.find_all("img")
        findings = [
            locate(img, index, "Image does not have an alt attribute")
            for index, img in enumerate(images, start=1)
            if not img.has_attr("alt")
        ]
        return RuleOutcome(findings=findings, applicable=bool(images))
