"""Ordered pattern lists evaluated with last-match-wins semantics."""
from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from typing import TextIO

from .. import io
from .compiler import compile_pattern
from .models import Pattern

logger = logging.getLogger(__name__)


class PathSpec:
    """An ordered, immutable list of compiled patterns.

    Later patterns take precedence over earlier ones. Pass directories with
    a trailing ``/`` so that directory-only patterns (``build/``) can match
    them; a leading ``/`` or ``./`` on the path is ignored.
    """

    __slots__ = ("_patterns",)

    def __init__(self, patterns: Iterable[Pattern] = ()) -> None:
        self._patterns = tuple(patterns)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> PathSpec:
        """Compile raw gitignore lines; blanks, comments and ``/`` are skipped.

        Raises :class:`~ignorespec.engine.models.PatternError` for the first
        line that does not compile, leaving nothing half-built.
        """
        spec = cls(compile_pattern(line) for line in io.iter_pattern_lines(lines))
        logger.debug("built PathSpec with %d patterns", len(spec))
        return spec

    @classmethod
    def from_reader(cls, handle: TextIO) -> PathSpec:
        return cls.from_lines(handle)

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> PathSpec:
        with open(path, encoding="utf-8") as handle:
            return cls.from_reader(handle)

    @property
    def patterns(self) -> tuple[Pattern, ...]:
        return self._patterns

    def __len__(self) -> int:
        return len(self._patterns)

    def __iter__(self) -> Iterator[Pattern]:
        return iter(self._patterns)

    def __repr__(self) -> str:
        return f"PathSpec({[pattern.text for pattern in self._patterns]!r})"

    def match(self, path: str | os.PathLike[str]) -> bool:
        return self.match_verbose(path)[1]

    def match_verbose(self, path: str | os.PathLike[str]) -> tuple[Pattern | None, bool]:
        """Return the last pattern matching ``path`` along with the verdict.

        The pattern may be a negated one that re-included the path, in which
        case the verdict is False.
        """
        matched: Pattern | None = None
        verdict = False
        for pattern in self._patterns:
            if pattern.match(path):
                matched = pattern
                verdict = not pattern.negate
        return matched, verdict

    def match_files(self, paths: Iterable[str]) -> Iterator[str]:
        for path in paths:
            if self.match(path):
                yield path
