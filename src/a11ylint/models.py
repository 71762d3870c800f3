"""Core models for a11ylint."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from a11ylint.dom import Document


class A11yLintError(Exception):
    """Base class for a11ylint errors."""


class InvalidDocumentError(A11yLintError):
    """Raised when a document has no root element to evaluate."""


class Impact(Enum):
    """Rule impact levels, lowest first."""
    MINOR = "minor"
    MODERATE = "moderate"
    SERIOUS = "serious"
    CRITICAL = "critical"

    @classmethod
    def from_string(cls, value: str) -> Impact:
        for member in cls:
            if member.value == value:
                return member
        raise ValueError(f"Unknown impact: {value}")


@dataclass(frozen=True)
class Finding:
    """One element that failed one rule."""
    html: str
    target: tuple[str, ...]
    failure_summary: str

    def to_dict(self) -> dict:
        return {
            "html": self.html,
            "target": list(self.target),
            "failureSummary": self.failure_summary,
        }


@dataclass(frozen=True)
class RuleResult:
    """A rule outcome carrying its findings."""
    id: str
    impact: Impact
    description: str
    help: str
    help_url: str
    tags: tuple[str, ...]
    nodes: tuple[Finding, ...]
    total_nodes: int | None = None

    @property
    def node_count(self) -> int:
        """Number of findings before any truncation."""
        return len(self.nodes) if self.total_nodes is None else self.total_nodes

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "impact": self.impact.value,
            "description": self.description,
            "help": self.help,
            "helpUrl": self.help_url,
            "tags": list(self.tags),
            "nodes": [node.to_dict() for node in self.nodes],
        }


@dataclass(frozen=True)
class PassResult:
    """A rule that applied to the document and found nothing."""
    id: str
    description: str
    help: str

    def to_dict(self) -> dict:
        return {"id": self.id, "description": self.description, "help": self.help}


@dataclass(frozen=True)
class Report:
    """Result of auditing one document."""
    url: str
    violations: tuple[RuleResult, ...] = ()
    passes: tuple[PassResult, ...] = ()
    incomplete: tuple[RuleResult, ...] = ()
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def violation(self, rule_id: str) -> RuleResult | None:
        for result in self.violations:
            if result.id == rule_id:
                return result
        return None

    def has_pass(self, rule_id: str) -> bool:
        return any(p.id == rule_id for p in self.passes)

    def to_dict(self) -> dict:
        return {
            "url": self.url,
            "violations": [v.to_dict() for v in self.violations],
            "passes": [p.to_dict() for p in self.passes],
            "incomplete": [i.to_dict() for i in self.incomplete],
            "timestamp": format_timestamp(self.timestamp),
        }


def format_timestamp(value: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a ``Z`` suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    utc = value.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class RuleContext:
    """Context passed to rules during evaluation."""
    document: Document
    config: dict = field(default_factory=dict)


@dataclass
class RuleOutcome:
    """What a rule found, and whether anything in the document applied to it."""
    findings: list[Finding] = field(default_factory=list)
    applicable: bool = False


class Rule(ABC):
    """Base class for all a11ylint rules."""
    id: str
    description: str
    help: str
    help_url: str
    impact: Impact
    tags: tuple[str, ...] = ()
    pack: str
    emits_pass: bool = False
    pass_description: str = ""
    surfaced: bool = True

    @abstractmethod
    def evaluate(self, context: RuleContext) -> RuleOutcome:
        """Evaluate this rule against the given document."""

    def to_result(self, findings: list[Finding]) -> RuleResult:
        return RuleResult(
            id=self.id,
            impact=self.impact,
            description=self.description,
            help=self.help,
            help_url=self.help_url,
            tags=tuple(self.tags),
            nodes=tuple(findings),
        )

    def to_pass(self) -> PassResult:
        return PassResult(
            id=self.id,
            description=self.pass_description or self.description,
            help=self.help,
        )
