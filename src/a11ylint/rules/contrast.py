"""Rule: text with insufficient color contrast (WCAG 1.4.3)."""
from __future__ import annotations

import logging

from a11ylint.color import contrast_ratio, parse_color, parse_inline_style, required_ratio
from a11ylint.locator import locate
from a11ylint.models import Impact, Rule, RuleContext, RuleOutcome
from a11ylint.rules._helpers import axe_url

logger = logging.getLogger("a11ylint")

TEXT_TAGS = ("p", "h1", "h2", "h3", "h4", "h5", "h6", "span", "div", "a", "button", "label", "li")

DEFAULT_MAX_FINDINGS = 10


class ColorContrast(Rule):
    """Inline foreground/background pairs must meet the AA contrast ratio.

    Only elements declaring both ``color`` and ``background-color`` in their
    own ``style`` attribute are checked; unparsable colors are skipped.
    """

    id = "color-contrast"
    description = "Elements must meet minimum color contrast ratio thresholds"
    help = "Elements must meet minimum color contrast ratio thresholds"
    help_url = axe_url("color-contrast")
    impact = Impact.SERIOUS
    tags = ("wcag2aa", "wcag143", "cat.color")
    pack = "extended"

    def evaluate(self, context: RuleContext) -> RuleOutcome:
        max_findings = context.config.get("max_findings", DEFAULT_MAX_FINDINGS)
        if not isinstance(max_findings, int) or isinstance(max_findings, bool) or max_findings < 1:
            logger.warning("Invalid max_findings '%s', falling back to %d", max_findings, DEFAULT_MAX_FINDINGS)
            max_findings = DEFAULT_MAX_FINDINGS
        findings = []
        applicable = False

        for index, element in enumerate(context.document.find_all(*TEXT_TAGS), start=1):
            if not element.text.strip():
                continue
            style = parse_inline_style(element.get("style"))
            if "color" not in style or "background-color" not in style:
                continue

            fg = parse_color(style["color"])
            bg = parse_color(style["background-color"])
            if fg is None or bg is None:
                logger.debug("Skipping unparsable colors on <%s>: %r / %r",
                             element.tag, style["color"], style["background-color"])
                continue

            applicable = True
            ratio = contrast_ratio(fg, bg)
            expected = required_ratio(style)
            if ratio < expected:
                findings.append(locate(
                    element, index,
                    f"Element has insufficient color contrast of {ratio:.2f} "
                    f"(foreground color: {style['color']}, background color: {style['background-color']}, "
                    f"expected contrast ratio of {expected}:1)",
                ))

        return RuleOutcome(findings=findings[:max_findings], applicable=applicable)
