"""Command line entrypoint for comparing versions and matching ranges.

Usage:
  npm-semver compare 1.2.3 1.2.4
  npm-semver satisfies 1.2.3 "^1.0.0 || ^2.0.0"
  npm-semver sort 1.0.0 1.0.0-rc.1 0.9.0
  npm-semver max-satisfying "~1.2" 1.2.0 1.2.5 1.3.0
  npm-semver check constraints.json [--summary] [--warn-only]

Parse failures exit with status 2; a ``check`` with findings exits with 10.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import yaml

from .config import ConfigError, Settings, load_settings
from .errors import SemverError
from .models import Version
from .parsers.semver import max_satisfying, satisfies, sort_versions
from .report import aggregate
from .serialization import dumps, load_constraints
from .summary import render_summary

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_MATCH = 1
EXIT_PARSE_ERROR = 2
EXIT_FINDINGS = 10


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="npm-semver", description=__doc__.splitlines()[0])
    sub = parser.add_subparsers(dest="command", required=True)

    compare = sub.add_parser("compare", help="Print -1, 0 or 1 comparing two versions")
    compare.add_argument("left")
    compare.add_argument("right")

    match = sub.add_parser("satisfies", help="Test whether a version matches a range")
    match.add_argument("version")
    match.add_argument("range")
    match.add_argument("--include-prerelease", action="store_true")

    order = sub.add_parser("sort", help="Sort versions by precedence")
    order.add_argument("versions", nargs="+")
    order.add_argument("--reverse", action="store_true")

    best = sub.add_parser("max-satisfying", help="Print the highest version matching a range")
    best.add_argument("range")
    best.add_argument("versions", nargs="+")
    best.add_argument("--include-prerelease", action="store_true")

    check = sub.add_parser("check", help="Check installed versions against declared ranges")
    check.add_argument(
        "path",
        nargs="?",
        default="-",
        help="Constraints document (JSON or YAML); '-' reads stdin",
    )
    check.add_argument("--format", choices=("json", "yaml"), default=None)
    check.add_argument("--include-prerelease", action="store_true")
    check.add_argument("--summary", action="store_true", help="Print Markdown instead of JSON")
    check.add_argument("--warn-only", action="store_true")

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return _build_parser().parse_args(argv)


def _read_document(path: str, fmt: str | None) -> Any:
    if path == "-":
        text = sys.stdin.read()
    else:
        text = Path(path).read_text(encoding="utf-8")
        if fmt is None and Path(path).suffix in {".yaml", ".yml"}:
            fmt = "yaml"
    if fmt == "yaml":
        return yaml.safe_load(text)
    return json.loads(text)


def _run_check(args: argparse.Namespace, settings: Settings) -> int:
    document = load_constraints(
        _read_document(args.path, args.format),
        include_prereleases=args.include_prerelease or settings.include_prereleases,
    )
    findings = document.check()
    report = aggregate(document, findings)
    logger.info("Checked %d constraints, %d findings", len(document.constraints), len(findings))

    if args.summary:
        print(render_summary(report), end="")
    else:
        print(dumps(report, indent=2))

    if report["hasFindings"] and not (args.warn_only or settings.warn_only):
        return EXIT_FINDINGS
    return EXIT_OK


def _dispatch(args: argparse.Namespace, settings: Settings) -> int:
    include = getattr(args, "include_prerelease", False) or settings.include_prereleases

    if args.command == "compare":
        print(Version.parse(args.left).compare(Version.parse(args.right)))
        return EXIT_OK

    if args.command == "satisfies":
        ok = satisfies(args.version, args.range, include_prereleases=include)
        print("true" if ok else "false")
        return EXIT_OK if ok else EXIT_NO_MATCH

    if args.command == "sort":
        for version in sort_versions(args.versions, reverse=args.reverse):
            print(version)
        return EXIT_OK

    if args.command == "max-satisfying":
        found = max_satisfying(args.versions, args.range, include_prereleases=include)
        if found is None:
            return EXIT_NO_MATCH
        print(found)
        return EXIT_OK

    return _run_check(args, settings)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    logging.basicConfig(level=settings.log_level_number, format="%(levelname)s %(name)s: %(message)s")

    try:
        return _dispatch(args, settings)
    except FileNotFoundError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_PARSE_ERROR
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        print(f"ERROR: Failed to read document: {exc}", file=sys.stderr)
        return EXIT_PARSE_ERROR
    except SemverError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_PARSE_ERROR


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
