"""gitignore-specific normalization of a pattern's path segments."""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

DOUBLE_STAR = "**"


@dataclass(frozen=True)
class Segments:
    """Normalized segments of one pattern.

    ``anchored`` records that a leading slash was dropped. ``nested_only`` is
    set for the ``**/`` pattern, which the generic compiler cannot express.
    """

    parts: tuple[str, ...]
    anchored: bool = False
    nested_only: bool = False


def collapse_double_stars(parts: Sequence[str]) -> list[str]:
    """Collapse every run of consecutive ``**`` segments to a single one."""
    collapsed: list[str] = []
    for part in parts:
        if part == DOUBLE_STAR and collapsed and collapsed[-1] == DOUBLE_STAR:
            continue
        collapsed.append(part)
    return collapsed


def normalize(text: str) -> Segments:
    parts = collapse_double_stars(text.split("/"))

    if parts == [DOUBLE_STAR, ""]:
        return Segments(tuple(parts), nested_only=True)

    anchored = False
    if parts[0] == "":
        # Leading slash: match from the root only.
        parts = parts[1:]
        anchored = True
    elif len(parts) == 1 or (len(parts) == 2 and parts[1] == ""):
        # A lone name (optionally with a trailing slash) matches at any depth.
        if parts[0] != DOUBLE_STAR:
            parts = [DOUBLE_STAR, *parts]
    # Otherwise "dir/name" stays relative to the root, as `git check-ignore` does.

    if len(parts) > 1 and parts[-1] == "":
        # Trailing slash: the directory and everything beneath it.
        parts[-1] = DOUBLE_STAR
    return Segments(tuple(parts), anchored=anchored)
