"""Tests for glob translation."""

import re
import warnings

import pytest

from ignorespec.engine.glob import GlobKind, GlobToken, glob_to_regex, translate_glob


def test_translate_merges_literal_runs() -> None:
    assert translate_glob("abc*d?") == [
        GlobToken(GlobKind.LITERAL, "abc"),
        GlobToken(GlobKind.ANY_RUN),
        GlobToken(GlobKind.LITERAL, "d"),
        GlobToken(GlobKind.ANY_CHAR),
    ]


def test_translate_escapes() -> None:
    assert translate_glob(r"\*\?\[x\]") == [GlobToken(GlobKind.LITERAL, "*?[x]")]


def test_trailing_backslash_is_literal() -> None:
    assert translate_glob("abc\\") == [GlobToken(GlobKind.LITERAL, "abc\\")]
    assert re.fullmatch(glob_to_regex("abc\\"), "abc\\")


@pytest.mark.parametrize(
    "glob,body,negated",
    [
        ("[abc]", "abc", False),
        ("[!abc]", "abc", True),
        ("[^abc]", "abc", True),
        ("[]]", "]", False),
        ("[!]a-]", "]a-", True),
        ("[a\\]b]", "a\\]b", False),
    ],
)
def test_translate_classes(glob: str, body: str, negated: bool) -> None:
    assert translate_glob(glob) == [GlobToken(GlobKind.CHAR_CLASS, body, negated)]


def test_unterminated_class_is_literal() -> None:
    assert translate_glob("a[c") == [GlobToken(GlobKind.LITERAL, "a[c")]
    assert translate_glob("a[!]") == [GlobToken(GlobKind.LITERAL, "a[!]")]


@pytest.mark.parametrize(
    "glob,text,expected",
    [
        ("*.txt", "file.txt", True),
        ("*.txt", "dir/file.txt", False),
        ("a?c", "abc", True),
        ("a?c", "a/c", False),
        ("a[!b]c", "a/c", False),
        ("a[!b]c", "azc", True),
        ("a[a-c]z", "abz", True),
        ("a[a-c]z", "adz", False),
        ("[]-]", "-", True),
        ("[]-]", "]", True),
        ("[\\^x]", "^", True),
        ("[&~|]", "~", True),
        ("a.b", "axb", False),
        ("a[!-z]c", "abc", True),
        ("a[!-z]c", "a-c", False),
        ("a[!-z]c", "azc", False),
        ("a[-z]c", "a-c", True),
        ("a[-z]c", "abc", False),
        ("a[az-]c", "a-c", True),
        ("a[az-]c", "abc", False),
        ("a[!az-]c", "a5c", True),
        ("a[!az-]c", "a-c", False),
        ("a[\\-]c", "a-c", True),
        ("a[+--]b", ",b", False),
        ("a[+--]b", "a,b", True),
        ("a[+--]b", "a-b", True),
        ("a[+--]b", "a.b", False),
    ],
)
def test_glob_to_regex(glob: str, text: str, expected: bool) -> None:
    assert (re.fullmatch(glob_to_regex(glob), text) is not None) is expected


def test_reversed_range_is_rejected_by_re() -> None:
    with pytest.raises(re.error):
        re.compile(glob_to_regex("[z-a]"))


@pytest.mark.parametrize(
    "glob,expected",
    [
        ("[!-z]", "[^/\\-z]"),
        ("[-z]", "[\\-z]"),
        ("[az-]", "[az\\-]"),
        ("[+--]", "[+-\\-]"),
        ("[a-c]", "[a-c]"),
    ],
)
def test_class_dash_rendering(glob: str, expected: str) -> None:
    assert glob_to_regex(glob) == expected


def test_class_dashes_compile_without_warnings() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        for glob in ("a[+--]b", "a[--/]b", "a[!--]b", "a[a-c-]b"):
            re.compile(glob_to_regex(glob))
