"""Summarization guide — points the reader at the project's guideline file."""

from __future__ import annotations

import sys
from typing import TextIO

from doc_health.core.config import ScanConfig
from doc_health.utils.exit_codes import ExitCode

GUIDELINES: tuple[str, ...] = (
    "Create dated archives in docs/archived/ directory",
    "Retain important information and instructions",
    "Update summaries with recent key points",
    "Add references to archived content",
    "Follow document-specific guidelines for each file type",
)


def summarize(
    config: ScanConfig,
    *,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Print the guideline summary if the guide file exists.

    Returns ``ExitCode.SUCCESS`` when the guide is present.  Otherwise a
    single error line goes to *err*, nothing goes to *out*, and the result
    is ``ExitCode.FAILURE``.
    """
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr

    guide = config.resolve(config.guide_path)
    if not guide.is_file():
        print(
            f"error: documentation summarization guide not found: {config.guide_path}",
            file=err,
        )
        return ExitCode.FAILURE

    print("======= Documentation Summarization Guide =======", file=out)
    print(
        f"Please follow the guidelines in {config.guide_path} to summarize large documents.",
        file=out,
    )
    print("", file=out)
    print("Summary of guidelines:", file=out)
    for i, line in enumerate(GUIDELINES, start=1):
        print(f"{i}. {line}", file=out)
    print("", file=out)
    print(f"For detailed instructions, review {config.guide_path}", file=out)
    return ExitCode.SUCCESS
