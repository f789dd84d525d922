"""Shared fixtures for doc_health tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from doc_health.core.config import ScanConfig

DAY = 86400
NOW = 1_760_000_000.0  # fixed clock for age calculations


def write_doc(root: Path, rel: str, content: str | bytes, *, age_days: float = 0) -> Path:
    """Write a document under *root* and back-date its mtime."""
    p = root / rel
    p.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        p.write_bytes(content)
    else:
        p.write_text(content, encoding="utf-8")
    mtime = NOW - age_days * DAY
    os.utime(p, (mtime, mtime))
    return p


@pytest.fixture
def make_config(tmp_path: Path):
    """Build a ``ScanConfig`` rooted at ``tmp_path``."""

    def _make(*watched: str, **kwargs) -> ScanConfig:
        return ScanConfig(root=tmp_path, watched_paths=tuple(watched), **kwargs)

    return _make


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    """Keep DOC_HEALTH_* overrides from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.startswith("DOC_HEALTH_"):
            monkeypatch.delenv(key, raising=False)
