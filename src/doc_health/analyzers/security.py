"""Security analyzer — secret-like content in watched documents.

Patterns are intentionally broad (any 25+ character alphanumeric run is a
candidate key) since the report is advisory and a human reviews each hit.
IP addresses are reported at ``Severity.WARN``; everything else at ``ALERT``.
"""

from __future__ import annotations

import logging
from typing import Iterable

from doc_health.analyzers import matching_paths
from doc_health.core.config import ScanConfig
from doc_health.core.documents import read_texts
from doc_health.model import RuleCategory
from doc_health.model.records import SecurityFinding
from doc_health.rules import PatternRule, rules_for

_logger = logging.getLogger(__name__)


def scan_security(
    config: ScanConfig,
    rules: Iterable[PatternRule] | None = None,
    *,
    texts: dict[str, str] | None = None,
) -> list[SecurityFinding]:
    """One finding per security rule that matches at least one document."""
    selected = rules_for(RuleCategory.SECURITY, config.rules if rules is None else rules)
    if texts is None:
        texts = read_texts(config)

    findings: list[SecurityFinding] = []
    for rule in selected:
        paths = matching_paths(rule, texts)
        if not paths:
            continue
        _logger.debug("rule %s matched %s", rule.rule_id, ", ".join(paths))
        findings.append(
            SecurityFinding(
                rule_name=rule.name,
                rule_id=rule.rule_id,
                title=rule.title,
                severity=rule.severity,
                paths=paths,
            )
        )
    return findings
