"""Tests for scan_duplication and scan_obsolete."""

from __future__ import annotations

from pathlib import Path

from doc_health.analyzers.duplication import scan_duplication, scan_obsolete
from doc_health.model import RuleCategory, Severity
from doc_health.rules import DEFAULT_RULES, DUP_PRINCIPLES_001, make_rule

from conftest import write_doc


class TestScanDuplication:
    """Duplication rules fire only when two or more documents match."""

    def test_principles_in_two_files(self, tmp_path: Path, make_config) -> None:
        """Both A.md and B.md mention Self-preservation → one finding naming both."""
        write_doc(tmp_path, "A.md", "# Goals\nSelf-preservation comes first.\n")
        write_doc(tmp_path, "B.md", "Remember: Self-preservation.\n")
        write_doc(tmp_path, "C.md", "Unrelated notes.\n")

        findings = scan_duplication(make_config("A.md", "B.md", "C.md"), DEFAULT_RULES)

        assert len(findings) == 1
        f = findings[0]
        assert f.rule_name == "principles"
        assert f.rule_id == DUP_PRINCIPLES_001
        assert f.paths == ("A.md", "B.md")
        assert f.severity is Severity.ALERT

    def test_single_match_is_not_duplication(self, tmp_path: Path, make_config) -> None:
        """A topic in exactly one file produces no finding."""
        write_doc(tmp_path, "A.md", "Love of humans\n")
        write_doc(tmp_path, "B.md", "nothing here\n")

        assert scan_duplication(make_config("A.md", "B.md"), DEFAULT_RULES) == []

    def test_three_matches_single_finding(self, tmp_path: Path, make_config) -> None:
        """Matching three files still yields exactly one finding listing all three."""
        for name in ("a.md", "b.md", "c.md"):
            write_doc(tmp_path, name, "├── src/\n")

        findings = scan_duplication(make_config("a.md", "b.md", "c.md"), DEFAULT_RULES)

        assert [f.rule_name for f in findings] == ["structure"]
        assert findings[0].paths == ("a.md", "b.md", "c.md")

    def test_paths_follow_watched_order(self, tmp_path: Path, make_config) -> None:
        write_doc(tmp_path, "z.md", "Bearer token\n")
        write_doc(tmp_path, "a.md", "API_KEY=...\n")

        findings = scan_duplication(make_config("z.md", "a.md"), DEFAULT_RULES)

        assert findings[0].rule_name == "api-docs"
        assert findings[0].paths == ("z.md", "a.md")

    def test_matching_is_case_sensitive(self, tmp_path: Path, make_config) -> None:
        """Like grep, 'self-preservation' does not match 'Self-preservation'."""
        write_doc(tmp_path, "a.md", "self-preservation\n")
        write_doc(tmp_path, "b.md", "Self-preservation\n")

        assert scan_duplication(make_config("a.md", "b.md"), DEFAULT_RULES) == []

    def test_missing_files_ignored(self, tmp_path: Path, make_config) -> None:
        write_doc(tmp_path, "a.md", "Reproduction\n")
        write_doc(tmp_path, "b.md", "Reproduction\n")

        findings = scan_duplication(make_config("a.md", "gone.md", "b.md"), DEFAULT_RULES)

        assert findings[0].paths == ("a.md", "b.md")

    def test_findings_in_rule_table_order(self, tmp_path: Path, make_config) -> None:
        write_doc(tmp_path, "a.md", "Bearer\nproject structure\n")
        write_doc(tmp_path, "b.md", "Bearer\ndirectory structure\n")

        findings = scan_duplication(make_config("a.md", "b.md"), DEFAULT_RULES)

        assert [f.rule_name for f in findings] == ["structure", "api-docs"]

    def test_custom_rule(self, tmp_path: Path, make_config) -> None:
        """Only the rules passed in are applied."""
        rule = make_rule("roadmap", r"Roadmap", RuleCategory.DUPLICATION)
        write_doc(tmp_path, "a.md", "Roadmap\nSelf-preservation\n")
        write_doc(tmp_path, "b.md", "Roadmap\nSelf-preservation\n")

        findings = scan_duplication(make_config("a.md", "b.md"), [rule])

        assert [f.rule_name for f in findings] == ["roadmap"]

    def test_defaults_to_config_rules(self, tmp_path: Path, make_config) -> None:
        write_doc(tmp_path, "a.md", "Self-preservation\n")
        write_doc(tmp_path, "b.md", "Self-preservation\n")

        findings = scan_duplication(make_config("a.md", "b.md"))

        assert [f.rule_name for f in findings] == ["principles"]

    def test_non_duplication_rules_skipped(self, tmp_path: Path, make_config) -> None:
        """Security patterns never produce duplication findings."""
        write_doc(tmp_path, "a.md", "10.0.0.1\n")
        write_doc(tmp_path, "b.md", "10.0.0.2\n")

        assert scan_duplication(make_config("a.md", "b.md"), DEFAULT_RULES) == []


class TestScanObsolete:
    """Obsolete-reference rules fire on any match."""

    def test_single_file_reference(self, tmp_path: Path, make_config) -> None:
        write_doc(tmp_path, "a.md", "Run token_tracker.sh daily.\n")
        write_doc(tmp_path, "b.md", "clean\n")

        findings = scan_obsolete(make_config("a.md", "b.md"), DEFAULT_RULES)

        assert len(findings) == 1
        assert findings[0].rule_name == "obsolete-tooling"
        assert findings[0].paths == ("a.md",)

    def test_no_reference(self, tmp_path: Path, make_config) -> None:
        write_doc(tmp_path, "a.md", "token_tracker_sh is fine\n")
        assert scan_obsolete(make_config("a.md"), DEFAULT_RULES) == []
