"""Color parsing and WCAG contrast math.

WCAG 2.x Level AA thresholds:
  - Normal text: 4.5:1
  - Large text:  3.0:1  (>= 18px, or >= 14px and bold)

Only inline ``style`` declarations are considered; nothing is inherited or
computed.
"""
from __future__ import annotations

import re
from typing import NamedTuple

CONTRAST_NORMAL = 4.5
CONTRAST_LARGE = 3.0

LARGE_TEXT_PX = 18.0
LARGE_BOLD_TEXT_PX = 14.0


class RGB(NamedTuple):
    r: int
    g: int
    b: int


NAMED_COLORS = {
    "black": RGB(0, 0, 0),
    "white": RGB(255, 255, 255),
    "red": RGB(255, 0, 0),
    "green": RGB(0, 128, 0),
    "blue": RGB(0, 0, 255),
    "yellow": RGB(255, 255, 0),
    "gray": RGB(128, 128, 128),
    "grey": RGB(128, 128, 128),
}

_HEX_RE = re.compile(r"^#([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$")
_RGB_RE = re.compile(r"^rgb\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)$")
_PX_RE = re.compile(r"^(\d+(?:\.\d+)?)px$")
_IMPORTANT_RE = re.compile(r"\s*!important\s*$", re.IGNORECASE)


def parse_color(value: str | None) -> RGB | None:
    """Parse ``#rrggbb``, ``rgb(r, g, b)`` or a named color.

    Returns None for anything else, including short hex, alpha forms and
    out-of-range channels.
    """
    if not value or not isinstance(value, str):
        return None
    value = value.strip().lower()

    m = _HEX_RE.match(value)
    if m:
        return RGB(*(int(part, 16) for part in m.groups()))

    m = _RGB_RE.match(value)
    if m:
        channels = [int(part) for part in m.groups()]
        if any(c > 255 for c in channels):
            return None
        return RGB(*channels)

    return NAMED_COLORS.get(value)


def _linearize(channel: int) -> float:
    c = channel / 255.0
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: RGB) -> float:
    """https://www.w3.org/TR/WCAG21/#dfn-relative-luminance"""
    r, g, b = rgb
    return 0.2126 * _linearize(r) + 0.7152 * _linearize(g) + 0.0722 * _linearize(b)


def contrast_ratio(rgb1: RGB, rgb2: RGB) -> float:
    """
    Contrast ratio between two colors per WCAG 2.1, always >= 1.0.
    https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
    """
    l1 = relative_luminance(rgb1)
    l2 = relative_luminance(rgb2)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def parse_inline_style(style: str | None) -> dict[str, str]:
    """Parse a ``style`` attribute into lowercase property -> value."""
    result: dict[str, str] = {}
    if not style:
        return result
    for prop in style.split(";"):
        if ":" not in prop:
            continue
        name, _, value = prop.partition(":")
        name = name.strip().lower()
        value = _IMPORTANT_RE.sub("", value.strip())
        if name and value:
            result[name] = value
    return result


def _font_size_px(style: dict[str, str]) -> float | None:
    m = _PX_RE.match(style.get("font-size", "").strip().lower())
    return float(m.group(1)) if m else None


def _is_bold(style: dict[str, str]) -> bool:
    weight = style.get("font-weight", "").strip().lower()
    if weight in ("bold", "bolder"):
        return True
    return weight.isdigit() and int(weight) >= 700


def is_large_text(style: dict[str, str]) -> bool:
    size = _font_size_px(style)
    if size is None:
        return False
    if size >= LARGE_TEXT_PX:
        return True
    return size >= LARGE_BOLD_TEXT_PX and _is_bold(style)


def required_ratio(style: dict[str, str]) -> float:
    """Minimum contrast for text styled by ``style``."""
    return CONTRAST_LARGE if is_large_text(style) else CONTRAST_NORMAL
