"""doc_health — advisory health report for a project's markdown documents."""

__all__ = [
    "__version__",
    "ScanConfig",
    "scan_health",
    "scan_duplication",
    "scan_obsolete",
    "scan_security",
    "render",
]
__version__ = "0.1.0"

from doc_health.core.config import ScanConfig  # noqa: E402, F401
from doc_health.analyzers.health import scan_health  # noqa: E402, F401
from doc_health.analyzers.duplication import (  # noqa: E402, F401
    scan_duplication,
    scan_obsolete,
)
from doc_health.analyzers.security import scan_security  # noqa: E402, F401
from doc_health.reports.render import render  # noqa: E402, F401
