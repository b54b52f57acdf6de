"""Compilation of gitignore patterns into anchored regular expressions."""
from __future__ import annotations

import logging
import re

from .glob import glob_to_regex
from .models import DIR_MARK, Pattern, PatternError
from .segments import DOUBLE_STAR, Segments, normalize

logger = logging.getLogger(__name__)

# A directory boundary followed by anything beneath it.
_DESCENDANTS = f"(?P<{DIR_MARK}>/).*"
_OPTIONAL_DESCENDANTS = f"(?:{_DESCENDANTS})?"


def build_regex(segments: Segments) -> str:
    """Render normalized segments as a regex that must match a whole path."""
    if segments.nested_only:
        # "**/": anything that is not a top-level entry.
        return f"^.+{_DESCENDANTS}$"

    parts = segments.parts
    end = len(parts) - 1
    expr = ["^"]
    need_slash = False
    for i, seg in enumerate(parts):
        if seg == DOUBLE_STAR:
            if i == 0 and i == end:
                # "**" alone matches every path.
                expr.append(f"[^/]+{_OPTIONAL_DESCENDANTS}")
            elif i == 0:
                # Any number of leading directories.
                expr.append("(?:.+/)?")
                need_slash = False
            elif i == end:
                # At least one more level below.
                expr.append(_DESCENDANTS)
            else:
                # Zero or more inner directories.
                expr.append("(?:/.+)?")
                need_slash = True
            continue

        if need_slash:
            expr.append("/")
        expr.append("[^/]+" if seg == "*" else glob_to_regex(seg))
        if i == end:
            # A trailing name matches a file, or a directory with its contents.
            expr.append(_OPTIONAL_DESCENDANTS)
        need_slash = True
    expr.append("$")
    return "".join(expr)


def compile_pattern(text: str) -> Pattern:
    """Compile one gitignore pattern line.

    A leading ``!`` sets :attr:`Pattern.negate`; the rest of the text is
    compiled. :attr:`Pattern.text` keeps the input unchanged.
    """
    body = text
    negate = body.startswith("!")
    if negate:
        body = body[1:]
    source = build_regex(normalize(body))
    try:
        regex = re.compile(source, re.DOTALL)
    except re.error as exc:
        raise PatternError(text, str(exc)) from exc
    logger.debug("compiled %r -> %s", text, source)
    return Pattern(text, negate, regex)
