"""Point findings at the elements that produced them."""
from __future__ import annotations

from dataclasses import dataclass

from a11ylint.dom import Element
from a11ylint.models import Finding

# Large elements such as tables are cut down to this many characters
MAX_EXCERPT_LENGTH = 200


def selector_for(element: Element, ordinal: int) -> str:
    """``tag:nth-child(k)`` where k counts the rule's own element list."""
    return f"{element.tag}:nth-child({ordinal})"


def excerpt(markup: str, max_length: int | None = None) -> str:
    if max_length is None or len(markup) <= max_length:
        return markup
    return markup[:max_length] + "..."


@dataclass(frozen=True)
class ElementRef:
    """Display reference to an element: selector plus markup excerpt."""
    element: Element
    selector: str
    html: str

    @classmethod
    def at(cls, element: Element, ordinal: int, max_length: int | None = None) -> ElementRef:
        return cls(
            element=element,
            selector=selector_for(element, ordinal),
            html=excerpt(element.outer_html(), max_length),
        )

    @classmethod
    def opening_tag(cls, element: Element, selector: str | None = None) -> ElementRef:
        """Reference by start tag only, for document-level elements."""
        return cls(element=element, selector=selector or element.tag, html=element.start_tag())

    def finding(self, summary: str) -> Finding:
        return Finding(html=self.html, target=(self.selector,), failure_summary=summary)


def locate(element: Element, ordinal: int, summary: str, max_length: int | None = None) -> Finding:
    """Finding for the ``ordinal``-th (1-based) element of a rule's list."""
    return ElementRef.at(element, ordinal, max_length).finding(summary)
