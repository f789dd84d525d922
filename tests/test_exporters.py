"""Tests for the JSON exporter and the bundled schema."""

from __future__ import annotations

import json

import jsonschema
import pytest

from doc_health.contracts.load import load_schema, validate_instance
from doc_health.model import Severity, Tier
from doc_health.model.records import (
    DocumentRecord,
    HealthReport,
    HealthSummary,
    MissingDocument,
    SecurityFinding,
)
from doc_health.reflect import ReflectionReport
from doc_health.reports.exporters import SCHEMA_NAME, build_report_dict, export_json
from doc_health.utils.json_norm import stable_json_dumps


def _health() -> HealthReport:
    return HealthReport(
        entries=(
            DocumentRecord("a.md", 20000, 10, 3, Tier.CRITICAL),
            MissingDocument("b.md"),
        ),
        summary=HealthSummary(critical_count=1),
        generated_at="2026-01-01 00:00:00",
    )


class TestExportJson:
    def test_sorted_keys_and_newline(self) -> None:
        text = export_json(health=_health())
        assert text.endswith("\n")
        data = json.loads(text)
        assert list(data) == sorted(data)
        assert data["health"]["records"][0]["tier"] == "critical"
        assert data["needs_summarizing"] is True

    def test_omits_sections_not_run(self) -> None:
        d = build_report_dict(security=[])
        assert set(d) == {"schema_version", "tool_version", "security"}

    def test_findings_validate(self) -> None:
        f = SecurityFinding("api-key", "SEC_API_KEY_001", "keys", Severity.ALERT, ("a.md",))
        data = json.loads(export_json(security=[f]))
        assert data["security"][0]["paths"] == ["a.md"]


class TestSchema:
    def test_schema_loads(self) -> None:
        assert load_schema(SCHEMA_NAME)["type"] == "object"

    def test_rejects_bad_tier(self) -> None:
        d = build_report_dict(health=_health())
        d["health"]["records"][0]["tier"] = "huge"
        with pytest.raises(jsonschema.ValidationError):
            validate_instance(d, SCHEMA_NAME)

    def test_rejects_empty_finding_paths(self) -> None:
        d = build_report_dict(duplication=[])
        d["duplication"].append(
            {"rule_name": "x", "rule_id": "X", "title": "x", "severity": "alert", "paths": []}
        )
        with pytest.raises(jsonschema.ValidationError):
            validate_instance(d, SCHEMA_NAME)


class TestStableJson:
    def test_sorted_keys_and_tuples(self) -> None:
        assert stable_json_dumps({"b": 1, "a": ("x",)}, indent=None) == (
            '{"a": ["x"], "b": 1}\n'
        )

    def test_dataclass_serialized_as_dict(self) -> None:
        report = ReflectionReport("docs", ("docs/a.sh",), {"a.sh": 0})
        assert stable_json_dumps(report, indent=None) == (
            '{"component": "docs", "files": ["docs/a.sh"], "references": {"a.sh": 0}}\n'
        )
