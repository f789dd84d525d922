"""Analyzers turn watched documents into records and findings.

Each pattern scanner follows the same shape:

1. read every watched document once (``core.documents.read_texts``),
2. select the ``PatternRule`` entries of its category,
3. for each rule, collect the watched paths whose content matches,
4. emit at most one finding per rule, in rule-table order.

Available analyzers:
    - scan_health: size tiers, line counts, staleness
    - scan_duplication / scan_obsolete: repeated or retired topics
    - scan_security: secret-like tokens, credentialed URLs, IP addresses
"""

from __future__ import annotations

from typing import Mapping

from doc_health.rules import PatternRule


def matching_paths(rule: PatternRule, texts: Mapping[str, str]) -> tuple[str, ...]:
    """Watched paths (in watched order) whose content matches *rule*."""
    return tuple(path for path, text in texts.items() if rule.matches(text))
