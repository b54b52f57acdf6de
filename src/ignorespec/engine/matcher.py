"""Path normalization used before any pattern is tested."""
from __future__ import annotations

import os


def normalize_path(path: str | os.PathLike[str]) -> str:
    """Return ``path`` with ``/`` separators and one leading ``/`` and ``./`` removed."""
    text = os.fspath(path)
    if os.sep != "/":
        text = text.replace(os.sep, "/")
    if text.startswith("/"):
        text = text[1:]
    if text.startswith("./"):
        text = text[2:]
    return text
