"""
linterlog - Main runner and CLI.

Loads sources, runs the analyzer and prints findings.
"""

from __future__ import annotations

import argparse
import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .analyzer import ANALYZER, Pass, ParsedFile
from .config import ConfigError, LintConfig, RuleConfig, resolve_config
from .reporting import Finding, Reporter
from .scanner import iter_files, load_source, parse_source

logger = logging.getLogger(__name__)


def lint_file(path: Path, rules: RuleConfig) -> list[Finding]:
    """Lint a single file. Unreadable or invalid files yield no findings."""
    try:
        src = load_source(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("could not read %s: %s", path, e)
        return []

    tree = parse_source(src)
    if tree is None:
        return []

    reporter = Reporter()
    ANALYZER.run(Pass(
        files=[ParsedFile(path=str(path), tree=tree, lines=src.text.split("\n"))],
        rules=rules,
        report=reporter.sink,
    ))
    return reporter.findings


def run(cfg: LintConfig) -> Reporter:
    """Lint every file selected by cfg and return a Reporter with findings."""
    reporter = Reporter()
    paths = list(iter_files(cfg))
    logger.debug("linting %d files with %d jobs", len(paths), cfg.jobs)

    if cfg.jobs > 1 and len(paths) > 1:
        with ThreadPoolExecutor(max_workers=cfg.jobs) as pool:
            results = list(pool.map(lambda p: lint_file(p, cfg.rules), paths))
    else:
        results = [lint_file(p, cfg.rules) for p in paths]

    for findings in results:
        reporter.extend(findings)
    reporter.files_scanned = len(paths)
    return reporter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linterlog",
        description=f"linterlog v{__version__}: checks log message style and safety",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        default=["."],
        help="Files or directories to scan (default: current directory)",
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="YAML rules document (default: config/config.yml if present)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument(
        "-j", "--jobs",
        type=int,
        default=1,
        help="Number of files to lint in parallel (default: 1)",
    )
    parser.add_argument(
        "--watch",
        action="store_true",
        help="Watch the paths and re-lint files as they change",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=0.75,
        help="Watch mode poll interval in seconds (default: 0.75)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        rules = resolve_config(args.config)
    except ConfigError as e:
        print(f"linterlog: {e}", file=sys.stderr)
        return 2

    cfg = LintConfig(
        paths=tuple(Path(p) for p in args.paths),
        rules=rules,
        json_output=args.json,
        jobs=max(1, args.jobs),
    )

    if args.watch:
        from .daemon import run_daemon
        return run_daemon(cfg, interval=max(0.1, args.interval))

    reporter = run(cfg)

    if cfg.json_output:
        print(reporter.render_json())
    else:
        print(reporter.render_human())

    return 1 if reporter.findings else 0


if __name__ == "__main__":
    raise SystemExit(main())
