"""Rule catalogue and pack loader.

``core`` holds the basic checks; ``extended`` adds the heuristic and
structural ones. Rules always run in catalogue order, whichever packs are
active.
"""
from __future__ import annotations

import logging

from a11ylint.models import Rule
from a11ylint.rules.buttons import ButtonName, ButtonTextQuality
from a11ylint.rules.contrast import ColorContrast
from a11ylint.rules.document import DocumentTitle, HtmlHasLang, MetaViewport
from a11ylint.rules.forms import Label, PlaceholderAsLabel
from a11ylint.rules.headings import EmptyHeading, HeadingOrder, MultipleH1, PageHasHeadingOne
from a11ylint.rules.images import ImageAlt
from a11ylint.rules.links import LinkName, LinkSameTextDiffTarget, LinkTextQuality
from a11ylint.rules.tables import TableCaption, TableHeaders

logger = logging.getLogger("a11ylint")

PACKS = ("core", "extended")

RULES: list[Rule] = [
    ImageAlt(),
    Label(),
    PlaceholderAsLabel(),
    ButtonName(),
    ButtonTextQuality(),
    LinkName(),
    LinkTextQuality(),
    LinkSameTextDiffTarget(),
    ColorContrast(),
    DocumentTitle(),
    PageHasHeadingOne(),
    MultipleH1(),
    HtmlHasLang(),
    MetaViewport(),
    HeadingOrder(),
    EmptyHeading(),
    TableHeaders(),
    TableCaption(),
]


def load_rules(active_packs: list[str]) -> list[Rule]:
    """Rules from the active packs, in catalogue order."""
    for pack_name in active_packs:
        if pack_name not in PACKS:
            logger.warning("Unknown pack '%s' (not registered)", pack_name)
    return [rule for rule in RULES if rule.pack in active_packs]


def get_rule(rule_id: str) -> Rule | None:
    for rule in RULES:
        if rule.id == rule_id:
            return rule
    return None
