"""Records produced by a single scan — never persisted, never mutated."""

from __future__ import annotations

from dataclasses import dataclass, field

from . import Severity, Tier


@dataclass(frozen=True, slots=True)
class DocumentRecord:
    """Metrics for one watched document that exists on disk."""

    path: str
    size_bytes: int
    line_count: int
    age_days: int
    tier: Tier
    stale: bool = False

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "size_bytes": self.size_bytes,
            "line_count": self.line_count,
            "age_days": self.age_days,
            "tier": self.tier.value,
            "stale": self.stale,
        }


@dataclass(frozen=True, slots=True)
class MissingDocument:
    """A watched path that could not be stat'ed or read."""

    path: str
    reason: str = "missing"


@dataclass(frozen=True, slots=True)
class HealthSummary:
    """Tally of the health scan; missing documents count toward nothing."""

    critical_count: int = 0
    large_count: int = 0
    stale_count: int = 0

    @property
    def needs_summarizing(self) -> bool:
        return self.critical_count + self.large_count > 0

    @property
    def healthy(self) -> bool:
        return not (self.critical_count or self.large_count or self.stale_count)

    def to_dict(self) -> dict:
        return {
            "critical_count": self.critical_count,
            "large_count": self.large_count,
            "stale_count": self.stale_count,
        }


@dataclass(frozen=True, slots=True)
class HealthReport:
    """Result of ``scan_health``.

    ``entries`` holds one item per watched path, in watched order: a
    ``DocumentRecord`` for files that were measured, a ``MissingDocument``
    for the rest.
    """

    entries: tuple[DocumentRecord | MissingDocument, ...]
    summary: HealthSummary
    generated_at: str = ""
    stale_days: int = 30

    @property
    def records(self) -> tuple[DocumentRecord, ...]:
        return tuple(e for e in self.entries if isinstance(e, DocumentRecord))

    @property
    def missing(self) -> tuple[MissingDocument, ...]:
        return tuple(e for e in self.entries if isinstance(e, MissingDocument))

    def to_dict(self) -> dict:
        return {
            "generated_at": self.generated_at,
            "stale_days": self.stale_days,
            "records": [r.to_dict() for r in self.records],
            "missing": [{"path": m.path, "reason": m.reason} for m in self.missing],
            "summary": self.summary.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class PatternFinding:
    """A pattern rule together with the watched paths it matched."""

    rule_name: str
    rule_id: str
    title: str
    severity: Severity
    paths: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "rule_name": self.rule_name,
            "rule_id": self.rule_id,
            "title": self.title,
            "severity": self.severity.value,
            "paths": list(self.paths),
        }


@dataclass(frozen=True, slots=True)
class DuplicationFinding(PatternFinding):
    """Same topic marker found in two or more watched documents."""


@dataclass(frozen=True, slots=True)
class ObsoleteReferenceFinding(PatternFinding):
    """A watched document still mentions retired tooling."""


@dataclass(frozen=True, slots=True)
class SecurityFinding(PatternFinding):
    """Secret-like content found in watched documents."""
