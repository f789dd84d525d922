"""Document access — stat and read each watched file at most once per scan.

A path that is missing, not a regular file, or unreadable is reported as
missing rather than raised; the scan always continues.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Iterator

from doc_health.core.config import ScanConfig
from doc_health.model.records import MissingDocument

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LoadedDocument:
    """Raw bytes and stat data for one watched path."""

    path: str
    data: bytes
    size_bytes: int
    mtime: float

    @property
    def text(self) -> str:
        return self.data.decode("utf-8", errors="replace")

    @property
    def line_count(self) -> int:
        # Same as ``wc -l``: a final line without a newline is not counted.
        return self.data.count(b"\n")


def load_document(config: ScanConfig, rel_path: str) -> LoadedDocument | MissingDocument:
    """Stat and read one watched path."""
    location = config.resolve(rel_path)
    try:
        st = location.stat()
        if not location.is_file():
            _logger.debug("watched path %s is not a regular file", rel_path)
            return MissingDocument(path=rel_path, reason="not a file")
        data = location.read_bytes()
    except FileNotFoundError:
        _logger.debug("watched path %s does not exist", rel_path)
        return MissingDocument(path=rel_path, reason="missing")
    except OSError as exc:
        _logger.debug("watched path %s is unreadable: %s", rel_path, exc)
        return MissingDocument(path=rel_path, reason=f"unreadable: {exc.strerror or exc}")
    return LoadedDocument(
        path=rel_path,
        data=data,
        size_bytes=st.st_size,
        mtime=st.st_mtime,
    )


def iter_documents(
    config: ScanConfig,
) -> Iterator[LoadedDocument | MissingDocument]:
    """Yield one result per watched path, in watched order."""
    for rel_path in config.watched_paths:
        yield load_document(config, os.fspath(rel_path))


def read_texts(config: ScanConfig) -> dict[str, str]:
    """Decoded content of every readable watched document, in watched order."""
    return {
        doc.path: doc.text
        for doc in iter_documents(config)
        if isinstance(doc, LoadedDocument)
    }
