"""Centralized exit-code contract for all CLI commands.

Code  Meaning
----  -------
  0   Success — report printed (findings never change the exit code)
  1   Failure — ``summarize`` could not find its guide file
  2   Error — usage error or unusable configuration
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    FAILURE = 1
    ERROR = 2
