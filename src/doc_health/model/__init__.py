"""Enums shared across the scanners and the report layer."""

from __future__ import annotations

from enum import Enum


class Tier(str, Enum):
    """Size classification of a watched document."""

    NORMAL = "normal"
    LARGE = "large"
    CRITICAL = "critical"


class Severity(str, Enum):
    """How loudly a pattern finding is reported."""

    WARN = "warn"
    ALERT = "alert"


class RuleCategory(str, Enum):
    """Which scan a ``PatternRule`` belongs to."""

    DUPLICATION = "duplication"
    OBSOLETE = "obsolete"
    SECURITY = "security"
