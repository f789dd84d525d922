"""CLI entry-point for doc_health.

Usage:
    doc-health [options]                  # health + duplication + security
    doc-health [options] health
    doc-health [options] duplication
    doc-health [options] security
    doc-health [options] summarize
    doc-health [options] self-reflect [--seed N]

Options (before the subcommand):
    --root DIR  --config FILE  --watch PATH ...  --guide PATH
    --large-threshold N  --critical-threshold N  --stale-days N
    --json  --no-color  -v/--verbose  --version

The report is advisory: every scan exits 0.  Only ``summarize`` without
its guide file exits 1, and an unusable configuration exits 2.
"""

from __future__ import annotations

import argparse
import logging
import os
import random
import sys
import time
from datetime import datetime, timezone
from pathlib import Path

from doc_health import __version__
from doc_health.analyzers.duplication import scan_duplication, scan_obsolete
from doc_health.analyzers.health import scan_health
from doc_health.analyzers.security import scan_security
from doc_health.core.config import ConfigError, ScanConfig
from doc_health.core.documents import read_texts
from doc_health.reflect import render_reflection, self_reflect
from doc_health.reports.exporters import export_json
from doc_health.reports.render import (
    render,
    render_duplication,
    render_health,
    render_security,
)
from doc_health.reports.summarize import summarize
from doc_health.utils.exit_codes import ExitCode
from doc_health.utils.json_norm import stable_json_dumps

_logger = logging.getLogger("doc_health")


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="doc-health",
        description="Advisory health report for project documentation.",
    )
    p.add_argument(
        "--root",
        type=Path,
        default=Path("."),
        help="Project root the watched paths are relative to (default: .).",
    )
    p.add_argument(
        "--config",
        dest="config_path",
        type=Path,
        default=None,
        help="YAML config file (default: <root>/.doc-health.yml if present).",
    )
    p.add_argument(
        "--watch",
        dest="watched_paths",
        action="append",
        default=None,
        metavar="PATH",
        help="Watched document path; repeat to watch several. Replaces the configured list.",
    )
    p.add_argument("--guide", dest="guide_path", default=None, help="Summarization guide path.")
    p.add_argument("--large-threshold", dest="large_threshold_bytes", type=int, default=None)
    p.add_argument("--critical-threshold", dest="critical_threshold_bytes", type=int, default=None)
    p.add_argument("--stale-days", dest="stale_days", type=int, default=None)
    p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print the report as JSON instead of text.",
    )
    p.add_argument(
        "--no-color",
        dest="no_color",
        action="store_true",
        default=False,
        help="Disable ANSI colour even on a terminal.",
    )
    p.add_argument("-v", "--verbose", action="store_true", default=False)
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    sub = p.add_subparsers(dest="command")
    sub.add_parser("health", help="Size tiers and staleness of watched documents.")
    sub.add_parser("duplication", help="Topics duplicated across documents.")
    sub.add_parser("security", help="Secret-like content in documents.")
    sub.add_parser("summarize", help="Show the documentation summarization guidelines.")
    reflect_p = sub.add_parser(
        "self-reflect",
        help="Spot-check a random component for unreferenced scripts.",
    )
    reflect_p.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the component choice (reproducible runs).",
    )
    return p


def _use_color(args: argparse.Namespace) -> bool:
    if args.no_color or args.json_out or "NO_COLOR" in os.environ:
        return False
    return sys.stdout.isatty()


def _load_config(args: argparse.Namespace) -> ScanConfig:
    overrides = {
        "large_threshold_bytes": args.large_threshold_bytes,
        "critical_threshold_bytes": args.critical_threshold_bytes,
        "stale_days": args.stale_days,
        "guide_path": args.guide_path,
        "watched_paths": tuple(args.watched_paths) if args.watched_paths else None,
    }
    return ScanConfig.load(
        args.root,
        config_path=args.config_path,
        overrides=overrides,
    )


def _handle_scan(args: argparse.Namespace, config: ScanConfig) -> int:
    """Dispatch ``health``, ``duplication``, ``security`` or the full run."""
    command = args.command
    color = _use_color(args)
    rules = config.rules

    health = duplication = obsolete = security = None
    if command in (None, "health"):
        health = scan_health(config)
    if command in (None, "duplication", "security"):
        texts = read_texts(config)
        if command in (None, "duplication"):
            duplication = scan_duplication(config, rules, texts=texts)
            obsolete = scan_obsolete(config, rules, texts=texts)
        if command in (None, "security"):
            security = scan_security(config, rules, texts=texts)

    if args.json_out:
        sys.stdout.write(
            export_json(
                health=health,
                duplication=duplication,
                obsolete=obsolete,
                security=security,
            )
        )
        return ExitCode.SUCCESS

    if command == "health":
        sys.stdout.write(render_health(health, color=color))
    elif command == "duplication":
        sys.stdout.write(render_duplication(duplication, obsolete, rules=rules, color=color))
    elif command == "security":
        sys.stdout.write(render_security(security, rules=rules, color=color))
    else:
        sys.stdout.write(
            render(
                health, duplication, security, obsolete=obsolete, rules=rules, color=color
            )
        )
    return ExitCode.SUCCESS


def _handle_self_reflect(args: argparse.Namespace, config: ScanConfig) -> int:
    rng = random.Random(args.seed) if args.seed is not None else None
    report = self_reflect(config, rng=rng)
    if args.json_out:
        sys.stdout.write(stable_json_dumps(report))
        return ExitCode.SUCCESS
    generated_at = datetime.fromtimestamp(time.time(), tz=timezone.utc).strftime(
        "%Y-%m-%d %H:%M:%S UTC"
    )
    sys.stdout.write(render_reflection(report, generated_at=generated_at))
    return ExitCode.SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (see ``utils.exit_codes``)."""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = _load_config(args)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return ExitCode.ERROR
    _logger.debug("effective config: %s", config)

    if args.command == "summarize":
        return summarize(config)

    if args.command == "self-reflect":
        return _handle_self_reflect(args, config)

    return _handle_scan(args, config)


if __name__ == "__main__":
    raise SystemExit(main())
