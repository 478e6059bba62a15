# SPDX-FileCopyrightText: 2025 ModelCloud.ai
# SPDX-FileCopyrightText: 2025 qubitium@modelcloud.ai
# SPDX-License-Identifier: Apache-2.0
# Contact: qubitium@modelcloud.ai, x.com/qubitium

from __future__ import annotations

import pytest
import regex

from escape_string import (
    ESCAPE_GETDIR,
    ESCAPE_REPLACE,
    InvalidModeCombination,
    Mode,
    compile_pattern,
    escape_literal,
)


_TEMPLATE_TOKEN = regex.compile(r"\\(\d)|\\(.)|&", regex.DOTALL)
_GLOB_ESCAPE = regex.compile(r"\\(.)", regex.DOTALL)


def render_template(template: str, match: regex.Match) -> str:
    """Expand a sed style template: ``&`` whole match, ``\\N`` group, ``\\x`` literal."""

    def expand(token: regex.Match) -> str:
        if token.group(1) is not None:
            return match.group(int(token.group(1))) or ""
        if token.group(2) is not None:
            return token.group(2)
        return match.group(0)

    return _TEMPLATE_TOKEN.sub(expand, template)


def has_unescaped_wildcard(text: str) -> bool:
    index = 0
    while index < len(text):
        char = text[index]
        if char == "\\":
            index += 2
            continue
        if char in "?*":
            return True
        index += 1
    return False


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("file?.txt", r"file\?.txt"),
        ("*", r"\*"),
        (r"a\b", r"a\\b"),
        (r"a\?b", r"a\\\?b"),
        (r"a\*", r"a\\\*"),
        (r"a\\b", r"a\\\\b"),
        ("plain.txt", "plain.txt"),
        ("", ""),
    ],
)
def test_getdir_literal(raw: str, expected: str) -> None:
    assert compile_pattern(raw, ESCAPE_GETDIR) == expected


@pytest.mark.parametrize("raw", ["*?*", r"x\*y?", "\\", r"\\?", "a[b]*"])
def test_getdir_literal_leaves_no_wildcards(raw: str) -> None:
    escaped = compile_pattern(raw, Mode.GETDIR_LITERAL)

    assert not has_unescaped_wildcard(escaped)
    assert _GLOB_ESCAPE.sub(r"\1", escaped) == raw


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("a&b", r"a\&b"),
        (r"a\&b", r"a\\\&b"),
        (r"a\b", r"a\\b"),
        (r"a\\b", r"a\\\\b"),
        (r"\1&\2&\3", r"\\1\&\\2\&\\3"),
        ("", ""),
    ],
)
def test_replace_literal(raw: str, expected: str) -> None:
    assert compile_pattern(raw, ESCAPE_REPLACE) == expected


@pytest.mark.parametrize("raw", ["plain text", "room 101", "1 2 3", "(a|b)*"])
def test_replace_literal_passes_safe_input_through(raw: str) -> None:
    assert compile_pattern(raw, Mode.REPLACE_LITERAL) == raw


@pytest.mark.parametrize("raw", [r"\1&\2&\3", "fish & chips", r"C:\new\0", "&&"])
def test_replace_literal_renders_verbatim(raw: str) -> None:
    template = compile_pattern(raw, Mode.REPLACE_LITERAL)
    subject = "before (x) after"

    result = regex.sub(r"\((x)\)", lambda m: render_template(template, m), subject)

    assert result == f"before {raw} after"


def test_escape_literal_direct() -> None:
    assert escape_literal("a*", Mode.GETDIR_LITERAL) == r"a\*"
    assert escape_literal("a&", Mode.REPLACE_LITERAL) == r"a\&"


@pytest.mark.parametrize("mode", [Mode.EXACT, Mode.GETDIR_LITERAL | Mode.LIST, 0])
def test_escape_literal_rejects_other_modes(mode) -> None:
    with pytest.raises(InvalidModeCombination):
        escape_literal("a", mode)
