"""Text rendering for health, duplication and security sections.

Output is a pure function of its inputs: the same report and findings
always render to the same text.  ANSI colour is opt-in via ``color=True``.
"""

from __future__ import annotations

from typing import Sequence

from doc_health.model import RuleCategory, Severity, Tier
from doc_health.model.records import (
    DocumentRecord,
    DuplicationFinding,
    HealthReport,
    ObsoleteReferenceFinding,
    PatternFinding,
    SecurityFinding,
)
from doc_health.rules import PatternRule, rules_for

_GREEN = "\033[0;32m"
_YELLOW = "\033[1;33m"
_RED = "\033[0;31m"
_RESET = "\033[0m"

_MARK = "⚠️ "

SUMMARIZE_COMMAND = "doc-health summarize"


class _Painter:
    """Wraps text in ANSI colour codes, or passes it through untouched."""

    def __init__(self, color: bool) -> None:
        self.color = color

    def _wrap(self, code: str, text: str) -> str:
        return f"{code}{text}{_RESET}" if self.color else text

    def green(self, text: str) -> str:
        return self._wrap(_GREEN, text)

    def yellow(self, text: str) -> str:
        return self._wrap(_YELLOW, text)

    def red(self, text: str) -> str:
        return self._wrap(_RED, text)

    def severity(self, severity: Severity, text: str) -> str:
        return self.red(text) if severity is Severity.ALERT else self.yellow(text)


def _files(n: int, singular: str, plural: str) -> str:
    return f"1 file {singular}" if n == 1 else f"{n} files {plural}"


# ── health ──────────────────────────────────────────────────────────


def _record_lines(rec: DocumentRecord, stale_days: int, p: _Painter) -> list[str]:
    line = (
        f"{rec.path}: {rec.size_bytes} bytes, {rec.line_count} lines, "
        f"last modified {rec.age_days} days ago"
    )
    if rec.tier is Tier.CRITICAL:
        out = [
            p.red(line),
            p.red(f"  {_MARK} This file is critically large and should be summarized ASAP"),
        ]
    elif rec.tier is Tier.LARGE:
        out = [
            p.yellow(line),
            p.yellow(f"  {_MARK} This file is getting large and may need summarizing soon"),
        ]
    else:
        out = [p.green(line)]
    if rec.stale:
        out.append(p.yellow(f"  {_MARK} This file hasn't been updated in over {stale_days} days"))
    return out


def render_health(report: HealthReport, *, color: bool = False) -> str:
    """Per-document lines in watched order, then the summary tally."""
    p = _Painter(color)
    lines = [
        p.green("======= Documentation Health Check ======="),
        f"Running checks on {report.generated_at} UTC",
        "",
    ]
    for entry in report.entries:
        if isinstance(entry, DocumentRecord):
            lines.extend(_record_lines(entry, report.stale_days, p))
        elif entry.reason == "missing":
            lines.append(p.red(f"WARNING: {entry.path} does not exist!"))
        else:
            lines.append(p.red(f"WARNING: {entry.path} could not be read ({entry.reason})"))

    s = report.summary
    lines += ["", p.green("===== Documentation Health Summary =====")]
    if s.critical_count:
        lines.append(
            p.red(
                _files(s.critical_count, "is", "are")
                + " critically large (immediate attention needed)"
            )
        )
    if s.large_count:
        lines.append(
            p.yellow(_files(s.large_count, "is", "are") + " large and should be summarized soon")
        )
    if s.stale_count:
        lines.append(
            p.yellow(
                _files(s.stale_count, "hasn't", "haven't")
                + f" been updated in over {report.stale_days} days"
            )
        )
    if s.healthy:
        lines.append(p.green("All documentation files are in good health!"))
    lines += [
        "",
        "Recommendation: run `doc-health` before starting work",
        "to identify documentation that needs cleaning or summarizing.",
    ]
    return "\n".join(lines) + "\n"


# ── pattern findings ────────────────────────────────────────────────


def _finding_lines(finding: PatternFinding, p: _Painter) -> list[str]:
    out = [p.severity(finding.severity, f"{_MARK} {finding.title}:")]
    out.extend(f"  {path}" for path in finding.paths)
    return out


def _checked_lines(
    findings: Sequence[PatternFinding], rules: Sequence[PatternRule], p: _Painter
) -> list[str]:
    """One 'Checking for ...' line per rule, each followed by its finding.

    Findings whose rule is not in *rules* follow at the end, in order.
    """
    remaining = list(findings)
    lines: list[str] = []
    for rule in rules:
        lines.append(p.yellow(f"Checking for {rule.check}..."))
        for finding in [f for f in remaining if f.rule_id == rule.rule_id]:
            remaining.remove(finding)
            lines.extend(_finding_lines(finding, p))
    for finding in remaining:
        lines.extend(_finding_lines(finding, p))
    return lines


def render_duplication(
    findings: Sequence[DuplicationFinding],
    obsolete: Sequence[ObsoleteReferenceFinding] = (),
    *,
    rules: Sequence[PatternRule] = (),
    color: bool = False,
) -> str:
    """Duplicated topics first, then obsolete references.

    With *rules*, each duplication and obsolete-reference rule gets a
    progress line in table order, followed by its finding if it fired.
    """
    p = _Painter(color)
    lines = [
        p.green("======= Documentation Duplication Check ======="),
        "Checking for common duplication patterns...",
    ]
    checked = [
        r for r in rules if r.category in (RuleCategory.DUPLICATION, RuleCategory.OBSOLETE)
    ]
    lines.extend(_checked_lines([*findings, *obsolete], checked, p))
    if not findings and not obsolete:
        lines.append(p.green("No duplication found."))
    return "\n".join(lines) + "\n"


def render_security(
    findings: Sequence[SecurityFinding],
    *,
    rules: Sequence[PatternRule] = (),
    color: bool = False,
) -> str:
    p = _Painter(color)
    lines = [
        p.green("======= Documentation Security Check ======="),
        "Checking for potential security issues...",
    ]
    lines.extend(_checked_lines(findings, rules_for(RuleCategory.SECURITY, rules), p))
    if not findings:
        lines.append(p.green("No potential security issues found."))
    return "\n".join(lines) + "\n"


def render_recommendation(report: HealthReport, *, color: bool = False) -> str:
    """Summarization hint; empty unless some document is large or critical."""
    if not report.summary.needs_summarizing:
        return ""
    p = _Painter(color)
    return (
        p.yellow("Consider running document summarization to clean up large files:")
        + f"\n  {SUMMARIZE_COMMAND}\n"
    )


def render(
    report: HealthReport,
    duplication: Sequence[DuplicationFinding],
    security: Sequence[SecurityFinding],
    *,
    obsolete: Sequence[ObsoleteReferenceFinding] = (),
    rules: Sequence[PatternRule] = (),
    color: bool = False,
) -> str:
    """Full report: health, duplication and security, plus the hint."""
    sections = [
        render_health(report, color=color),
        render_duplication(duplication, obsolete, rules=rules, color=color),
        render_security(security, rules=rules, color=color),
    ]
    recommendation = render_recommendation(report, color=color)
    if recommendation:
        sections.append(recommendation)
    return "\n".join(sections)
