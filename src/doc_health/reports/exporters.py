"""JSON exporter for scan results.

Only the sections that were actually run appear in the output; the
result is validated against ``health_report.schema.json`` before it is
returned.
"""

from __future__ import annotations

from typing import Any, Sequence

from doc_health import __version__
from doc_health.contracts.load import validate_instance
from doc_health.model.records import (
    DuplicationFinding,
    HealthReport,
    ObsoleteReferenceFinding,
    SecurityFinding,
)
from doc_health.utils.json_norm import stable_json_dumps

SCHEMA_NAME = "health_report.schema.json"
SCHEMA_VERSION = "health_report_v1"


def build_report_dict(
    *,
    health: HealthReport | None = None,
    duplication: Sequence[DuplicationFinding] | None = None,
    obsolete: Sequence[ObsoleteReferenceFinding] | None = None,
    security: Sequence[SecurityFinding] | None = None,
) -> dict[str, Any]:
    d: dict[str, Any] = {
        "schema_version": SCHEMA_VERSION,
        "tool_version": __version__,
    }
    if health is not None:
        d["health"] = health.to_dict()
        d["needs_summarizing"] = health.summary.needs_summarizing
    if duplication is not None:
        d["duplication"] = [f.to_dict() for f in duplication]
    if obsolete is not None:
        d["obsolete"] = [f.to_dict() for f in obsolete]
    if security is not None:
        d["security"] = [f.to_dict() for f in security]
    return d


def export_json(**sections: Any) -> str:
    """Build, validate and serialize the report; see ``build_report_dict``."""
    d = build_report_dict(**sections)
    validate_instance(d, SCHEMA_NAME)
    return stable_json_dumps(d)
