"""Data models shared across the ignorespec engine."""
from __future__ import annotations

import os
import re
from dataclasses import dataclass, field

from .matcher import normalize_path

# Name of the regex group that marks a directory boundary.
DIR_MARK = "ps_d"


class PatternError(ValueError):
    """Raised when a pattern cannot be compiled into a matcher."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"invalid pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


@dataclass(frozen=True)
class PatternMatch:
    """Result of a successful :meth:`Pattern.search`.

    ``descendant`` is true when the match went past a directory boundary,
    i.e. the pattern named an ancestor of ``path`` rather than ``path``
    itself. ``entity`` is the part of ``path`` the pattern actually named.
    """

    path: str
    entity: str
    descendant: bool


@dataclass(frozen=True)
class Pattern:
    text: str
    negate: bool
    regex: re.Pattern[str] = field(repr=False, compare=False)

    def match(self, path: str | os.PathLike[str]) -> bool:
        return self.regex.fullmatch(normalize_path(path)) is not None

    def search(self, path: str | os.PathLike[str]) -> PatternMatch | None:
        normalized = normalize_path(path)
        found = self.regex.fullmatch(normalized)
        if found is None:
            return None
        boundary = found.start(DIR_MARK) if DIR_MARK in self.regex.groupindex else -1
        if boundary == -1:
            return PatternMatch(normalized, normalized, False)
        return PatternMatch(normalized, normalized[:boundary], True)
