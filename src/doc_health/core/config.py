"""Scan configuration dataclass.

Sources, lowest precedence first: built-in defaults, a YAML file
(``.doc-health.yml`` at the scan root or ``--config``), ``DOC_HEALTH_*``
environment variables, then explicit overrides from the CLI.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Mapping

import yaml

from doc_health.rules import DEFAULT_RULES, PatternRule, make_rule

_logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".doc-health.yml"

DEFAULT_WATCHED_PATHS: tuple[str, ...] = (
    "README.md",
    "docs/GOALS.md",
    "docs/SYSTEM.md",
    "docs/TASKS.md",
    "docs/FUNDING.md",
    "docs/REPRODUCTION.md",
    "docs/COMMUNICATION.md",
    "docs/CLAUDE.md",
    "docs/TWITTER.md",
    "docs/CHANGELOG.md",
)

DEFAULT_REFLECT_COMPONENTS: tuple[str, ...] = (
    "core/system",
    "modules/communication",
    "modules/funding",
    "modules/reproduction",
    "docs",
)

# env var -> (field name, type)
_ENV_OVERRIDES: dict[str, tuple[str, type]] = {
    "DOC_HEALTH_LARGE_THRESHOLD": ("large_threshold_bytes", int),
    "DOC_HEALTH_CRITICAL_THRESHOLD": ("critical_threshold_bytes", int),
    "DOC_HEALTH_STALE_DAYS": ("stale_days", int),
    "DOC_HEALTH_WATCHED": ("watched_paths", tuple),
    "DOC_HEALTH_GUIDE": ("guide_path", str),
}

_TUPLE_FIELDS = frozenset(
    {"watched_paths", "reflect_components", "reflect_suffixes", "reference_suffixes"}
)


class ConfigError(ValueError):
    """Raised for an unusable configuration (bad YAML, threshold, or rule)."""


@dataclass(frozen=True)
class ScanConfig:
    """Immutable scan configuration, fixed for the duration of a run."""

    root: Path = field(default_factory=lambda: Path("."))
    large_threshold_bytes: int = 5000
    critical_threshold_bytes: int = 10000
    stale_days: int = 30
    watched_paths: tuple[str, ...] = DEFAULT_WATCHED_PATHS
    guide_path: str = "docs/SUMMARIZATION.md"
    reflect_components: tuple[str, ...] = DEFAULT_REFLECT_COMPONENTS
    reflect_suffixes: tuple[str, ...] = (".sh",)
    reference_suffixes: tuple[str, ...] = (".sh", ".md")
    extra_rules: tuple[PatternRule, ...] = ()

    def __post_init__(self) -> None:
        for name in ("large_threshold_bytes", "critical_threshold_bytes", "stale_days"):
            value = getattr(self, name)
            # bool is an int subclass; YAML `true` must not pass as 1
            if type(value) is not int:
                raise ConfigError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ConfigError(f"{name} must be non-negative")
        if self.large_threshold_bytes > self.critical_threshold_bytes:
            raise ConfigError(
                "large_threshold_bytes must not exceed critical_threshold_bytes "
                f"({self.large_threshold_bytes} > {self.critical_threshold_bytes})"
            )
        if not isinstance(self.guide_path, str) or not self.guide_path:
            raise ConfigError(f"guide_path must be a non-empty string, got {self.guide_path!r}")

    @property
    def rules(self) -> tuple[PatternRule, ...]:
        return DEFAULT_RULES + self.extra_rules

    def resolve(self, rel_path: str) -> Path:
        """Absolute location of a watched path under ``root``."""
        return self.root / rel_path

    # ── loading ─────────────────────────────────────────────────────

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, root: Path | None = None) -> "ScanConfig":
        """Build a config from plain values, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            if key == "rules":
                kwargs["extra_rules"] = _parse_rules(value)
            elif key in _TUPLE_FIELDS:
                if isinstance(value, str):
                    value = [value]
                if not isinstance(value, list):
                    raise ConfigError(f"{key} must be a list of strings")
                kwargs[key] = tuple(str(v) for v in value)
            elif key in known and key not in ("root", "extra_rules"):
                kwargs[key] = value
            else:
                _logger.debug("ignoring unknown config key %r", key)
        if root is not None:
            kwargs["root"] = root
        try:
            return cls(**kwargs)
        except TypeError as exc:
            raise ConfigError(str(exc)) from exc

    @classmethod
    def from_yaml(cls, path: Path, *, root: Path | None = None) -> "ScanConfig":
        """Load configuration from a YAML file."""
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"cannot load config {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"config {path} must be a mapping at top level")
        return cls.from_mapping(data, root=root if root is not None else path.parent)

    @classmethod
    def load(
        cls,
        root: Path,
        *,
        config_path: Path | None = None,
        env: Mapping[str, str] | None = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> "ScanConfig":
        """Resolve the effective configuration for a scan of *root*."""
        if config_path is None and (root / CONFIG_FILENAME).is_file():
            config_path = root / CONFIG_FILENAME
        if config_path is not None:
            _logger.debug("loading config from %s", config_path)
            config = cls.from_yaml(config_path, root=root)
        else:
            config = cls(root=root)

        changes = _env_changes(os.environ if env is None else env)
        changes.update({k: v for k, v in (overrides or {}).items() if v is not None})
        if not changes:
            return config
        try:
            return replace(config, **changes)
        except TypeError as exc:
            raise ConfigError(str(exc)) from exc


def _env_changes(env: Mapping[str, str]) -> dict[str, Any]:
    changes: dict[str, Any] = {}
    for key, (name, kind) in _ENV_OVERRIDES.items():
        raw = env.get(key)
        if raw is None or raw == "":
            continue
        if kind is int:
            try:
                changes[name] = int(raw)
            except ValueError as exc:
                raise ConfigError(f"{key} must be an integer, got {raw!r}") from exc
        elif kind is tuple:
            changes[name] = tuple(p.strip() for p in raw.split(",") if p.strip())
        else:
            changes[name] = raw
    return changes


def _parse_rules(raw: Any) -> tuple[PatternRule, ...]:
    if not isinstance(raw, list):
        raise ConfigError("'rules' must be a list of mappings")
    rules: list[PatternRule] = []
    for entry in raw:
        if not isinstance(entry, dict) or "name" not in entry or "pattern" not in entry:
            raise ConfigError(f"rule entries need 'name' and 'pattern': {entry!r}")
        try:
            rules.append(
                make_rule(
                    str(entry["name"]),
                    str(entry["pattern"]),
                    entry.get("category", "duplication"),
                    severity=entry.get("severity", "alert"),
                    title=str(entry.get("title", "")),
                    rule_id=str(entry.get("rule_id", "")),
                    check=str(entry.get("check", "")),
                )
            )
        except re.error as exc:
            raise ConfigError(f"rule {entry['name']!r}: invalid pattern: {exc}") from exc
        except ValueError as exc:
            raise ConfigError(f"rule {entry['name']!r}: {exc}") from exc
    return tuple(rules)
