"""Rules: document-level metadata (WCAG 2.4.2, 3.1.1, 1.4.4)."""
from __future__ import annotations

from a11ylint.locator import ElementRef
from a11ylint.models import Finding, Impact, Rule, RuleContext, RuleOutcome
from a11ylint.rules._helpers import axe_url, filled


class DocumentTitle(Rule):
    """The document needs a non-blank ``<title>``."""

    id = "document-title"
    description = "Documents must have a title to aid in navigation"
    help = "Documents must have <title> element to aid in navigation"
    help_url = axe_url("document-title")
    impact = Impact.SERIOUS
    tags = ("wcag2a", "wcag242", "cat.text-alternatives")
    pack = "core"
    emits_pass = True
    pass_description = "Document has a title"

    def evaluate(self, context: RuleContext) -> RuleOutcome:
        title = context.document.find("title")
        if title is not None and title.text.strip():
            return RuleOutcome(applicable=True)
        return RuleOutcome(
            findings=[Finding(
                html=title.outer_html() if title is not None else "<title></title>",
                target=("title",),
                failure_summary="Document does not have a title",
            )],
            applicable=True,
        )


class HtmlHasLang(Rule):
    """The root ``<html>`` element needs a ``lang`` attribute."""

    id = "html-has-lang"
    description = "The html element must have a lang attribute"
    help = "<html> element must have a lang attribute"
    help_url = axe_url("html-has-lang")
    impact = Impact.SERIOUS
    tags = ("wcag2a", "wcag311", "cat.language")
    pack = "core"
    emits_pass = True
    pass_description = "The html element has a lang attribute"

    def evaluate(self, context: RuleContext) -> RuleOutcome:
        root = context.document.root
        if filled(root.get("lang")):
            return RuleOutcome(applicable=True)
        ref = ElementRef.opening_tag(root, selector="html")
        return RuleOutcome(
            findings=[ref.finding("The <html> element does not have a lang attribute")],
            applicable=True,
        )


class MetaViewport(Rule):
    """Responsive pages declare ``<meta name="viewport">``."""

    id = "meta-viewport"
    description = "Documents should declare a viewport"
    help = 'Document must have a <meta name="viewport"> element'
    help_url = axe_url("meta-viewport")
    impact = Impact.MODERATE
    tags = ("wcag2aa", "wcag144", "best-practice", "cat.sensory-and-visual-cues")
    pack = "extended"
    emits_pass = True
    pass_description = "Document declares a viewport"

    def evaluate(self, context: RuleContext) -> RuleOutcome:
        for meta in context.document.find_all("meta"):
            if filled(meta.get("name")).lower() == "viewport":
                return RuleOutcome(applicable=True)
        head = context.document.find("head")
        html = head.start_tag() if head is not None else "<head>"
        return RuleOutcome(
            findings=[Finding(
                html=html,
                target=("head",),
                failure_summary='Document does not have a <meta name="viewport"> element',
            )],
            applicable=True,
        )
