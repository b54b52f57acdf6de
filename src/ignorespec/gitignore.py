"""One-shot helpers for testing a single path against gitignore content."""
from __future__ import annotations

import os
from collections.abc import Iterable
from typing import TextIO

from .engine.pathspec import PathSpec


def gitignore_match(lines: Iterable[str], path: str | os.PathLike[str]) -> bool:
    """Return True when ``path`` is ignored by the gitignore ``lines``."""
    return PathSpec.from_lines(lines).match(path)


def read_gitignore_match(handle: TextIO, path: str | os.PathLike[str]) -> bool:
    return PathSpec.from_reader(handle).match(path)
