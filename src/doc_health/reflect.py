"""Self-reflection — spot-check one component for files nothing refers to.

One component directory is picked at random, its files are listed, and
each script in it is looked up by name across the project's scripts and
documents.  A script that no other file mentions is a candidate for
removal.

The random source is injected so callers (and tests) can pin the choice.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

from doc_health.core.config import ScanConfig

_logger = logging.getLogger(__name__)

SUGGESTIONS: tuple[str, ...] = (
    "Review files with no references for potential obsolescence",
    "Check component documentation for accuracy and completeness",
    "Look for duplication of functionality across components",
    "Consider if component follows current architectural principles",
)


@dataclass(frozen=True, slots=True)
class ReflectionReport:
    """Files of the chosen component and how often each script is referenced."""

    component: str
    files: tuple[str, ...] = ()
    references: dict[str, int] = field(default_factory=dict)

    @property
    def unreferenced(self) -> list[str]:
        return [name for name, count in self.references.items() if count == 0]


def _is_hidden(path: Path, root: Path) -> bool:
    return any(part.startswith(".") for part in path.relative_to(root).parts)


def _iter_files(base: Path, root: Path) -> Iterator[Path]:
    """Regular, non-hidden files under *base*, sorted by path."""
    if not base.is_dir():
        return
    for p in sorted(base.rglob("*")):
        try:
            if p.is_file() and not _is_hidden(p, root):
                yield p
        except OSError:
            continue


def count_references(name: str, exclude: Path, config: ScanConfig) -> int:
    """Number of reference files under root (other than *exclude*) mentioning *name*."""
    root = config.root
    count = 0
    for candidate in _iter_files(root, root):
        if candidate.suffix not in config.reference_suffixes:
            continue
        if candidate.resolve() == exclude.resolve():
            continue
        try:
            text = candidate.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            _logger.debug("skipping unreadable %s: %s", candidate, exc)
            continue
        if name in text:
            count += 1
    return count


def self_reflect(config: ScanConfig, *, rng: random.Random | None = None) -> ReflectionReport:
    """Pick one configured component and report on its files."""
    if not config.reflect_components:
        return ReflectionReport(component="")
    rng = rng if rng is not None else random.Random()
    component = rng.choice(list(config.reflect_components))
    _logger.debug("selected component %s", component)

    root = config.root
    base = root / component
    files = list(_iter_files(base, root))
    if not files:
        _logger.debug("component %s has no files", component)

    references: dict[str, int] = {}
    for path in files:
        if path.suffix not in config.reflect_suffixes:
            continue
        references[path.name] = count_references(path.name, path, config)

    return ReflectionReport(
        component=component,
        files=tuple(p.relative_to(root).as_posix() for p in files),
        references=references,
    )


def render_reflection(report: ReflectionReport, *, generated_at: str = "") -> str:
    lines = ["======= Self-Reflection Process ======="]
    if generated_at:
        lines.append(f"Performing codebase health check on {generated_at}")
    lines += ["", f"Selected component for review: {report.component}", ""]

    lines.append("Files in this component:")
    lines.extend(report.files)
    lines += ["", "Checking for references to component files...", ""]

    if not report.references:
        lines.append("No scripts found in this component.")
    for name, count in report.references.items():
        if count == 0:
            lines.append(f"⚠️  Warning: {name} may be obsolete - no references found")
        else:
            noun = "file" if count == 1 else "files"
            lines.append(f"✓ {name} is referenced in {count} {noun}")

    lines += ["", "Reflection suggestions:"]
    lines.extend(f"{i}. {s}" for i, s in enumerate(SUGGESTIONS, start=1))
    lines += ["", "Self-reflection is complete. Add any issues found to TASKS.md as appropriate."]
    return "\n".join(lines) + "\n"
