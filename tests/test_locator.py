"""Tests for element references."""
from __future__ import annotations

from a11ylint.dom import Document
from a11ylint.locator import ElementRef, excerpt, locate, selector_for


def _doc(body: str) -> Document:
    return Document.from_html(f'<html lang="en"><body>{body}</body></html>')


class TestSelector:
    def test_uses_tag_and_ordinal(self):
        img = _doc('<img src="a">').find("img")
        assert selector_for(img, 4) == "img:nth-child(4)"


class TestExcerpt:
    def test_short_markup_untouched(self):
        assert excerpt("<p>x</p>", 200) == "<p>x</p>"

    def test_unbounded_by_default(self):
        markup = "<p>" + "x" * 1000 + "</p>"
        assert excerpt(markup) == markup

    def test_long_markup_truncated(self):
        assert excerpt("abcdefghij", 4) == "abcd..."


class TestElementRef:
    def test_at(self):
        button = _doc("<button>Go</button>").find("button")
        ref = ElementRef.at(button, 2)
        assert ref.selector == "button:nth-child(2)"
        assert ref.html == "<button>Go</button>"
        assert ref.element is button

    def test_opening_tag(self):
        doc = _doc("<p>x</p>")
        ref = ElementRef.opening_tag(doc.root)
        assert ref.selector == "html"
        assert ref.html == '<html lang="en">'

    def test_finding(self):
        img = _doc('<img src="a">').find("img")
        finding = locate(img, 1, "Image does not have an alt attribute")
        assert finding.target == ("img:nth-child(1)",)
        assert finding.failure_summary == "Image does not have an alt attribute"
        assert finding.html.startswith("<img")
