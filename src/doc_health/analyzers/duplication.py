"""Duplication analyzer — the same topic documented in more than one place.

A duplication rule only fires when two or more watched documents match it;
a topic living in exactly one document is where it belongs.  Obsolete
reference rules fire on any match.
"""

from __future__ import annotations

import logging
from typing import Iterable

from doc_health.analyzers import matching_paths
from doc_health.core.config import ScanConfig
from doc_health.core.documents import read_texts
from doc_health.model import RuleCategory
from doc_health.model.records import DuplicationFinding, ObsoleteReferenceFinding
from doc_health.rules import PatternRule, rules_for

_logger = logging.getLogger(__name__)


def scan_duplication(
    config: ScanConfig,
    rules: Iterable[PatternRule] | None = None,
    *,
    texts: dict[str, str] | None = None,
) -> list[DuplicationFinding]:
    """One finding per duplication rule that matches more than one document."""
    selected = rules_for(RuleCategory.DUPLICATION, config.rules if rules is None else rules)
    if texts is None:
        texts = read_texts(config)

    findings: list[DuplicationFinding] = []
    for rule in selected:
        paths = matching_paths(rule, texts)
        _logger.debug("rule %s matched %d document(s)", rule.rule_id, len(paths))
        if len(paths) <= 1:
            continue
        findings.append(
            DuplicationFinding(
                rule_name=rule.name,
                rule_id=rule.rule_id,
                title=rule.title,
                severity=rule.severity,
                paths=paths,
            )
        )
    return findings


def scan_obsolete(
    config: ScanConfig,
    rules: Iterable[PatternRule] | None = None,
    *,
    texts: dict[str, str] | None = None,
) -> list[ObsoleteReferenceFinding]:
    """One finding per obsolete-reference rule with at least one match."""
    selected = rules_for(RuleCategory.OBSOLETE, config.rules if rules is None else rules)
    if texts is None:
        texts = read_texts(config)

    findings: list[ObsoleteReferenceFinding] = []
    for rule in selected:
        paths = matching_paths(rule, texts)
        if not paths:
            continue
        findings.append(
            ObsoleteReferenceFinding(
                rule_name=rule.name,
                rule_id=rule.rule_id,
                title=rule.title,
                severity=rule.severity,
                paths=paths,
            )
        )
    return findings
