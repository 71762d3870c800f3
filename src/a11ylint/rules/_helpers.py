"""Shared helpers for rule modules."""
from __future__ import annotations

from a11ylint.dom import Document, Element

_AXE_HELP_URL = "https://dequeuniversity.com/rules/axe/4.10/{}"
_UNDERSTANDING_URL = "https://www.w3.org/WAI/WCAG21/Understanding/{}.html"

# Input types that never need a visible label
_UNLABELLED_INPUT_TYPES = {"hidden", "submit", "button", "reset", "image"}

_BUTTON_INPUT_TYPES = {"button", "submit", "reset"}


def axe_url(rule_id: str) -> str:
    return _AXE_HELP_URL.format(rule_id)


def understanding_url(slug: str) -> str:
    return _UNDERSTANDING_URL.format(slug)


def filled(value: str | None) -> str:
    """Trimmed value, or empty string when missing."""
    return value.strip() if value else ""


def input_type(element: Element) -> str:
    return filled(element.get("type")).lower() or "text"


def form_fields(document: Document) -> list[Element]:
    """Form controls a user types into or picks from."""
    return [
        el for el in document.find_all("input", "textarea", "select")
        if el.tag != "input" or input_type(el) not in _UNLABELLED_INPUT_TYPES
    ]


def label_targets(document: Document) -> set[str]:
    """Ids referenced by ``<label for=...>``."""
    return {filled(label.get("for")) for label in document.find_all("label")} - {""}


def has_label(element: Element, targets: set[str]) -> bool:
    """Explicit label, aria-label or aria-labelledby (presence only)."""
    element_id = filled(element.get("id"))
    if element_id and element_id in targets:
        return True
    return bool(filled(element.get("aria-label")) or filled(element.get("aria-labelledby")))


def buttons(document: Document) -> list[Element]:
    return [
        el for el in document.find_all("button", "input")
        if el.tag == "button" or input_type(el) in _BUTTON_INPUT_TYPES
    ]


def button_text(element: Element) -> str:
    """First non-empty of text content, value, aria-label, title."""
    for candidate in (element.text, element.get("value"), element.get("aria-label"), element.get("title")):
        text = filled(candidate)
        if text:
            return text
    return ""


def links(document: Document) -> list[Element]:
    return [el for el in document.find_all("a") if el.has_attr("href")]


def link_text(element: Element) -> str:
    """First non-empty of text content, aria-label, title."""
    for candidate in (element.text, element.get("aria-label"), element.get("title")):
        text = filled(candidate)
        if text:
            return text
    return ""
