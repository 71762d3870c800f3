"""Read-only document tree consumed by the rules.

Rules only see the :class:`Element` and :class:`Document` interface, so any
HTML parser can back them. :class:`SoupElement` adapts BeautifulSoup.
"""
from __future__ import annotations

import html as html_mod
from abc import ABC, abstractmethod
from collections.abc import Iterator

from bs4 import BeautifulSoup, Tag

from a11ylint.models import InvalidDocumentError

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")


class Element(ABC):
    """One element in a parsed document."""

    @property
    @abstractmethod
    def tag(self) -> str:
        """Lowercase tag name."""

    @property
    @abstractmethod
    def attrs(self) -> dict[str, str]:
        """Attributes in source order."""

    @property
    @abstractmethod
    def text(self) -> str:
        """Concatenated text of the whole subtree, untrimmed."""

    @abstractmethod
    def children(self) -> list[Element]:
        """Child elements in document order (text nodes excluded)."""

    @abstractmethod
    def outer_html(self) -> str:
        """Serialized markup of this element and its subtree."""

    def get(self, name: str, default: str | None = None) -> str | None:
        return self.attrs.get(name, default)

    def has_attr(self, name: str) -> bool:
        return name in self.attrs

    def start_tag(self) -> str:
        parts = [self.tag]
        for key, value in self.attrs.items():
            parts.append(f'{key}="{html_mod.escape(value, quote=True)}"')
        return "<" + " ".join(parts) + ">"

    def iter(self) -> Iterator[Element]:
        """Pre-order walk starting with this element."""
        stack: list[Element] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children()))

    def find_all(self, *tags: str) -> list[Element]:
        """Descendants (not self) with one of ``tags``, in document order."""
        wanted = set(tags)
        walker = self.iter()
        next(walker)
        return [el for el in walker if el.tag in wanted]


class SoupElement(Element):
    """Element backed by a BeautifulSoup ``Tag``."""

    def __init__(self, tag: Tag, name: str | None = None):
        self._tag = tag
        self._name = name or tag.name

    def __repr__(self) -> str:
        return f"SoupElement({self.start_tag()})"

    @property
    def tag(self) -> str:
        return self._name

    @property
    def attrs(self) -> dict[str, str]:
        result = {}
        for key, value in self._tag.attrs.items():
            # bs4 splits multi-valued attributes such as class into lists
            if isinstance(value, (list, tuple)):
                value = " ".join(value)
            result[key] = value
        return result

    @property
    def text(self) -> str:
        return self._tag.get_text()

    def children(self) -> list[Element]:
        return [SoupElement(child) for child in self._tag.children if isinstance(child, Tag)]

    def outer_html(self) -> str:
        if isinstance(self._tag, BeautifulSoup):
            inner = "".join(str(child) for child in self._tag.contents)
            return f"<{self._name}>{inner}</{self._name}>"
        return str(self._tag)

    def find_all(self, *tags: str) -> list[Element]:
        return [SoupElement(found) for found in self._tag.find_all(list(tags))]


class Document:
    """A parsed document: a root element plus query helpers."""

    def __init__(self, root: Element | None, source: str = ""):
        if root is None:
            raise InvalidDocumentError("Document has no root element")
        self.root = root
        self.source = source

    @classmethod
    def from_html(cls, markup: str, source: str = "") -> Document:
        """Parse ``markup`` with BeautifulSoup's ``html.parser``.

        Fragments without an ``<html>`` element get a synthetic ``html`` root.
        Markup that contains no element at all is rejected.
        """
        soup = BeautifulSoup(markup or "", "html.parser")
        html_tag = soup.find("html")
        if html_tag is not None:
            return cls(SoupElement(html_tag), source=source)
        if soup.find(True) is None:
            raise InvalidDocumentError("Markup contains no elements")
        return cls(SoupElement(soup, name="html"), source=source)

    def find_all(self, *tags: str) -> list[Element]:
        """Elements with one of ``tags``, root included, in document order."""
        found = self.root.find_all(*tags)
        if self.root.tag in tags:
            found.insert(0, self.root)
        return found

    def find(self, tag: str) -> Element | None:
        found = self.find_all(tag)
        return found[0] if found else None

    def headings(self) -> list[Element]:
        return self.find_all(*HEADING_TAGS)
