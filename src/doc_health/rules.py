"""Pattern rule registry.

Single source of truth for every duplication, obsolete-reference and
security pattern the scanners apply.  Scanners iterate the table uniformly;
adding a check means adding a ``PatternRule`` here (or in the YAML config),
never a new hand-written branch.

Patterns are matched line by line, case-sensitively, like ``grep -E``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from doc_health.model import RuleCategory, Severity

# ── Rule IDs ────────────────────────────────────────────────────────
DUP_STRUCTURE_001 = "DUP_STRUCTURE_001"
DUP_PRINCIPLES_001 = "DUP_PRINCIPLES_001"
DUP_API_DOCS_001 = "DUP_API_DOCS_001"
OBS_TOKEN_TOOLING_001 = "OBS_TOKEN_TOOLING_001"
SEC_API_KEY_001 = "SEC_API_KEY_001"
SEC_CREDENTIAL_URL_001 = "SEC_CREDENTIAL_URL_001"
SEC_IP_ADDRESS_001 = "SEC_IP_ADDRESS_001"


@dataclass(frozen=True, slots=True)
class PatternRule:
    """A named text pattern bound to a scan category and a severity."""

    name: str
    rule_id: str
    title: str
    pattern: re.Pattern[str]
    category: RuleCategory
    severity: Severity = Severity.ALERT
    check: str = ""

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def make_rule(
    name: str,
    pattern: str,
    category: RuleCategory | str,
    *,
    severity: Severity | str = Severity.ALERT,
    title: str = "",
    rule_id: str = "",
    check: str = "",
) -> PatternRule:
    """Build a ``PatternRule`` from plain values.

    Raises ``re.error`` for an invalid pattern and ``ValueError`` for an
    unknown category or severity.
    """
    category = RuleCategory(category)
    severity = Severity(severity)
    if not rule_id:
        rule_id = f"{category.value[:3].upper()}_{name.upper().replace('-', '_')}_001"
    return PatternRule(
        name=name,
        rule_id=rule_id,
        title=title or name,
        pattern=re.compile(pattern, re.MULTILINE),
        category=category,
        severity=severity,
        check=check or f"{name} patterns",
    )


DEFAULT_RULES: tuple[PatternRule, ...] = (
    # Duplication
    make_rule(
        "structure",
        r"project structure|directory structure|├──|│",
        RuleCategory.DUPLICATION,
        title="Project structure appears in multiple files",
        check="project structure duplication",
        rule_id=DUP_STRUCTURE_001,
    ),
    make_rule(
        "principles",
        r"Love of humans|Self-preservation|Reproduction",
        RuleCategory.DUPLICATION,
        title="Core principles appear in multiple files",
        check="core principles duplication",
        rule_id=DUP_PRINCIPLES_001,
    ),
    make_rule(
        "api-docs",
        r"API_KEY|API_SECRET|ACCESS_TOKEN|Bearer",
        RuleCategory.DUPLICATION,
        title="API documentation appears in multiple files",
        check="API documentation duplication",
        rule_id=DUP_API_DOCS_001,
    ),
    # Obsolete references
    make_rule(
        "obsolete-tooling",
        r"token tracking|token_tracker\.sh|token_report\.sh|token usage monitoring",
        RuleCategory.OBSOLETE,
        title="References to obsolete functionality found",
        check="obsolete functionality references",
        rule_id=OBS_TOKEN_TOOLING_001,
    ),
    # Security
    make_rule(
        "api-key",
        r"[a-zA-Z0-9]{25,}",
        RuleCategory.SECURITY,
        title="Potential API keys found in documentation",
        check="potential API keys in documentation",
        rule_id=SEC_API_KEY_001,
    ),
    make_rule(
        "credential-url",
        r"https?://[^:\n]+:[^@\n]+@",
        RuleCategory.SECURITY,
        title="URLs with embedded credentials found",
        check="URLs with embedded credentials",
        rule_id=SEC_CREDENTIAL_URL_001,
    ),
    make_rule(
        "ip-address",
        r"\b(?:[0-9]{1,3}\.){3}[0-9]{1,3}\b",
        RuleCategory.SECURITY,
        severity=Severity.WARN,
        title="IP addresses found in documentation (review for sensitivity)",
        check="IP addresses in documentation",
        rule_id=SEC_IP_ADDRESS_001,
    ),
)

ALL_RULE_IDS: list[str] = sorted(r.rule_id for r in DEFAULT_RULES)


def rules_for(
    category: RuleCategory, rules: Iterable[PatternRule]
) -> list[PatternRule]:
    """Return the rules tagged *category*, in table order."""
    return [r for r in rules if r.category == category]
