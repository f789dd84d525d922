"""Health analyzer — size tiers and staleness for every watched document."""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone

from doc_health.core.config import ScanConfig
from doc_health.core.documents import iter_documents
from doc_health.model import Tier
from doc_health.model.records import (
    DocumentRecord,
    HealthReport,
    HealthSummary,
    MissingDocument,
)

_logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400


def classify_tier(size_bytes: int, large_threshold: int, critical_threshold: int) -> Tier:
    """Map a byte size to a ``Tier``.

    Critical: ``size > critical``; Large: ``large < size <= critical``;
    otherwise Normal.
    """
    if size_bytes > critical_threshold:
        return Tier.CRITICAL
    if size_bytes > large_threshold:
        return Tier.LARGE
    return Tier.NORMAL


def age_in_days(mtime: float, now: float) -> int:
    """Whole days since *mtime*; files dated in the future are 0 days old."""
    return max(0, int((now - mtime) // SECONDS_PER_DAY))


def scan_health(config: ScanConfig, *, now: float | None = None) -> HealthReport:
    """Measure every watched path and tally critical, large and stale files.

    *now* is a POSIX timestamp; it defaults to the current time and exists
    so tests can pin the clock.
    """
    if now is None:
        now = time.time()

    entries: list[DocumentRecord | MissingDocument] = []
    critical = large = stale = missing = 0

    for doc in iter_documents(config):
        if isinstance(doc, MissingDocument):
            entries.append(doc)
            missing += 1
            continue

        tier = classify_tier(
            doc.size_bytes,
            config.large_threshold_bytes,
            config.critical_threshold_bytes,
        )
        age = age_in_days(doc.mtime, now)
        is_stale = age > config.stale_days

        if tier is Tier.CRITICAL:
            critical += 1
        elif tier is Tier.LARGE:
            large += 1
        if is_stale:
            stale += 1

        entries.append(
            DocumentRecord(
                path=doc.path,
                size_bytes=doc.size_bytes,
                line_count=doc.line_count,
                age_days=age,
                tier=tier,
                stale=is_stale,
            )
        )

    summary = HealthSummary(
        critical_count=critical,
        large_count=large,
        stale_count=stale,
    )
    _logger.debug(
        "health scan: %d watched, %d missing, %s",
        len(entries),
        missing,
        summary,
    )
    return HealthReport(
        entries=tuple(entries),
        summary=summary,
        generated_at=datetime.fromtimestamp(now, tz=timezone.utc).strftime(
            "%Y-%m-%d %H:%M:%S"
        ),
        stale_days=config.stale_days,
    )
