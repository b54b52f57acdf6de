"""ignorespec: gitignore-style path matching.

Quick Start:
    >>> from ignorespec import PathSpec
    >>>
    >>> spec = PathSpec.from_lines(["*.log", "build/", "!build/keep.log"])
    >>> spec.match("debug.log")
    True
    >>> spec.match("build/keep.log")
    False

Directories should be passed with a trailing ``/`` so that patterns such as
``build/`` can tell them apart from regular files.
"""

from collections.abc import Sequence

from .engine.compiler import compile_pattern
from .engine.models import DIR_MARK, Pattern, PatternError, PatternMatch
from .engine.pathspec import PathSpec
from .gitignore import gitignore_match, read_gitignore_match


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point mirroring :func:`ignorespec.cli.main`."""

    from .cli import main as cli_main

    return cli_main(argv)


__all__ = [
    "DIR_MARK",
    "PathSpec",
    "Pattern",
    "PatternError",
    "PatternMatch",
    "compile_pattern",
    "gitignore_match",
    "main",
    "read_gitignore_match",
]
