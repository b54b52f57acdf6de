"""Reading gitignore pattern lines and writing CLI output."""
from __future__ import annotations

import json
import os
from collections.abc import Iterable, Iterator


def trim(line: str) -> str:
    """Strip surrounding whitespace, keeping trailing spaces protected by a backslash."""
    line = line.rstrip("\r\n")
    if line.endswith("\\ "):
        return line.lstrip(" ")
    return line.strip()


def skip(line: str) -> bool:
    """Return True for lines that carry no pattern: blanks, comments and a lone ``/``."""
    return line == "" or line.startswith("#") or line == "/"


def iter_numbered_pattern_lines(lines: Iterable[str]) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, pattern)`` for each line that carries a pattern."""
    for number, raw in enumerate(lines, start=1):
        line = trim(raw)
        if skip(line):
            continue
        yield number, line


def iter_pattern_lines(lines: Iterable[str]) -> Iterator[str]:
    for _, line in iter_numbered_pattern_lines(lines):
        yield line


def write_json(obj: object) -> None:
    json.dump(obj, os.sys.stdout, indent=2, sort_keys=True)
    os.sys.stdout.write("\n")
    os.sys.stdout.flush()


def write_text(text: str) -> None:
    os.sys.stdout.write(text)
    if not text.endswith("\n"):
        os.sys.stdout.write("\n")
    os.sys.stdout.flush()
