"""Command line interface for checking paths against gitignore patterns."""
from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from . import io
from .engine.compiler import compile_pattern
from .engine.models import PatternError
from .engine.pathspec import PathSpec

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ignorespec", description="gitignore pattern matching CLI")
    parser.add_argument("-V", "--version", action="version", version="ignorespec 0.1")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="report which paths the patterns match")
    check.add_argument("paths", nargs="*", metavar="PATH")
    check.add_argument("-p", "--patterns", action="append", default=[], metavar="FILE")
    check.add_argument("-e", "--pattern", action="append", default=[], metavar="TEXT")
    check.add_argument("-v", "--verbose", action="store_true", help="show the deciding pattern")
    check.add_argument(
        "-n",
        "--non-matching",
        action="store_true",
        help="also list paths that are not matched (implies --verbose)",
    )
    check.add_argument("--stdin", action="store_true", help="read paths from standard input")
    check.add_argument("--format", choices=["text", "json"], default="text")

    regex = sub.add_parser("regex", help="print the compiled regular expression of patterns")
    regex.add_argument("patterns", nargs="+", metavar="PATTERN")
    regex.add_argument("--format", choices=["text", "json"], default="text")
    return parser


def _load_spec(args: argparse.Namespace) -> tuple[PathSpec, list[str]]:
    """Build a PathSpec from --patterns files then --pattern lines, with source labels."""
    lines: list[str] = []
    sources: list[str] = []
    for path in args.patterns:
        with open(path, encoding="utf-8") as handle:
            for number, line in io.iter_numbered_pattern_lines(handle):
                lines.append(line)
                sources.append(f"{path}:{number}")
    for number, line in io.iter_numbered_pattern_lines(args.pattern):
        lines.append(line)
        sources.append(f"<arg>:{number}")
    return PathSpec(compile_pattern(line) for line in lines), sources


def _command_check(args: argparse.Namespace) -> int:
    spec, sources = _load_spec(args)
    paths = list(args.paths)
    if args.stdin:
        paths.extend(line.rstrip("\r\n") for line in sys.stdin if line.strip())
    if not paths:
        raise ValueError("no paths given")

    verbose = args.verbose or args.non_matching
    rows: list[dict[str, object]] = []
    any_matched = False
    for path in paths:
        pattern, matched = spec.match_verbose(path)
        any_matched = any_matched or matched
        if not matched and not args.non_matching:
            continue
        source = None
        if pattern is not None:
            source = next(sources[i] for i, p in enumerate(spec.patterns) if p is pattern)
        rows.append(
            {
                "path": path,
                "matched": matched,
                "pattern": pattern.text if pattern is not None else None,
                "source": source,
            }
        )

    if args.format == "json":
        io.write_json({"results": rows})
    elif rows:
        lines = []
        for row in rows:
            if verbose:
                label = f"{row['source']}:{row['pattern']}" if row["pattern"] is not None else "::"
                lines.append(f"{label}\t{row['path']}")
            else:
                lines.append(str(row["path"]))
        io.write_text("\n".join(lines) + "\n")
    return 0 if any_matched else 1


def _command_regex(args: argparse.Namespace) -> int:
    compiled = [compile_pattern(text) for text in args.patterns]
    if args.format == "json":
        payload = [
            {"pattern": p.text, "negate": p.negate, "regex": p.regex.pattern} for p in compiled
        ]
        io.write_json(payload)
    else:
        io.write_text("\n".join(f"{p.text}\t{p.regex.pattern}" for p in compiled) + "\n")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    command = args.command
    try:
        if command == "check":
            return _command_check(args)
        if command == "regex":
            return _command_regex(args)
    except (PatternError, OSError, ValueError) as exc:
        logger.debug("command %s failed", command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2
    parser.error(f"unknown command {command}")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
