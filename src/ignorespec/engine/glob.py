"""Translation of a single path segment's shell glob into match primitives.

The grammar follows POSIX ``fnmatch()`` with ``FNM_PATHNAME``: wildcards
never match a ``/``.

- ``\\X`` matches ``X`` literally. A backslash at the end of the segment
  is a literal backslash.
- ``*`` matches any run of characters other than ``/``, including none.
- ``?`` matches exactly one character other than ``/``.
- ``[...]`` is a character class. ``[!...]`` and ``[^...]`` negate it. A
  ``]`` right after the opening bracket (or the negation marker) is a
  member. Without a closing ``]`` the ``[`` is a literal.
"""
from __future__ import annotations

import enum
import re
from collections.abc import Sequence
from dataclasses import dataclass


class GlobKind(str, enum.Enum):
    LITERAL = "literal"
    ANY_RUN = "any_run"
    ANY_CHAR = "any_char"
    CHAR_CLASS = "char_class"


@dataclass(frozen=True)
class GlobToken:
    kind: GlobKind
    value: str = ""
    negated: bool = False


# Characters that change meaning inside a Python ``re`` character set.
_CLASS_SPECIAL = frozenset("\\[]^&~|")


def _find_class_end(glob: str, start: int) -> int:
    """Return the index of the ``]`` closing the class opened before ``start``, or -1."""
    j = start
    if j < len(glob) and glob[j] in "!^":
        j += 1
    if j < len(glob) and glob[j] == "]":
        j += 1
    while j < len(glob) and glob[j] != "]":
        if glob[j] == "\\":
            j += 1
        j += 1
    return j if j < len(glob) else -1


def translate_glob(glob: str) -> list[GlobToken]:
    tokens: list[GlobToken] = []
    literal: list[str] = []

    def flush() -> None:
        if literal:
            tokens.append(GlobToken(GlobKind.LITERAL, "".join(literal)))
            literal.clear()

    i = 0
    while i < len(glob):
        char = glob[i]
        if char == "\\":
            # A lone trailing backslash stays literal.
            literal.append(glob[i + 1] if i + 1 < len(glob) else "\\")
            i += 2
            continue
        if char == "*":
            flush()
            tokens.append(GlobToken(GlobKind.ANY_RUN))
        elif char == "?":
            flush()
            tokens.append(GlobToken(GlobKind.ANY_CHAR))
        elif char == "[":
            end = _find_class_end(glob, i + 1)
            if end == -1:
                literal.append("[")
            else:
                flush()
                body = glob[i + 1 : end]
                negated = body[:1] in ("!", "^")
                if negated:
                    body = body[1:]
                tokens.append(GlobToken(GlobKind.CHAR_CLASS, body, negated))
                i = end
        else:
            literal.append(char)
        i += 1
    flush()
    return tokens


def _class_members(body: str) -> list[tuple[str, bool]]:
    """Split a class body into ``(char, escaped)`` pairs."""
    members: list[tuple[str, bool]] = []
    i = 0
    while i < len(body):
        char = body[i]
        if char == "\\" and i + 1 < len(body):
            i += 1
            members.append((body[i], True))
        else:
            members.append((char, False))
        i += 1
    return members


def _class_to_regex(body: str, negated: bool) -> str:
    # A negated class must still not match the separator.
    parts = ["[^/" if negated else "["]
    members = _class_members(body)
    last = len(members) - 1
    for index, (char, escaped) in enumerate(members):
        if char == "-":
            # Only an unescaped "-" between two members, not ending a range, is an operator.
            is_range = not escaped and 0 < index < last and parts[-1] != "-"
            parts.append("-" if is_range else "\\-")
        else:
            parts.append("\\" + char if char in _CLASS_SPECIAL else char)
    parts.append("]")
    return "".join(parts)


def token_to_regex(token: GlobToken) -> str:
    if token.kind is GlobKind.LITERAL:
        return re.escape(token.value)
    if token.kind is GlobKind.ANY_RUN:
        return "[^/]*"
    if token.kind is GlobKind.ANY_CHAR:
        return "[^/]"
    return _class_to_regex(token.value, token.negated)


def tokens_to_regex(tokens: Sequence[GlobToken]) -> str:
    return "".join(token_to_regex(token) for token in tokens)


def glob_to_regex(glob: str) -> str:
    return tokens_to_regex(translate_glob(glob))
