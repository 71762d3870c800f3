"""a11ylint - WCAG accessibility checks for rendered HTML."""

__version__ = "0.1.0"

from a11ylint.dom import Document, Element
from a11ylint.engine import Engine, audit_document, audit_html
from a11ylint.models import (
    A11yLintError,
    Finding,
    Impact,
    InvalidDocumentError,
    PassResult,
    Report,
    Rule,
    RuleContext,
    RuleOutcome,
    RuleResult,
)

__all__ = [
    "A11yLintError",
    "Document",
    "Element",
    "Engine",
    "Finding",
    "Impact",
    "InvalidDocumentError",
    "PassResult",
    "Report",
    "Rule",
    "RuleContext",
    "RuleOutcome",
    "RuleResult",
    "audit_document",
    "audit_html",
]
