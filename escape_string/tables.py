# SPDX-FileCopyrightText: 2025 ModelCloud.ai
# SPDX-FileCopyrightText: 2025 qubitium@modelcloud.ai
# SPDX-License-Identifier: Apache-2.0
# Contact: qubitium@modelcloud.ai, x.com/qubitium

"""Translation tables driving every escaping pass.

A table maps tokens (single characters or backslash sequences) to their
replacement text. Characters listed in ``escaped_chars`` that have no explicit
replacement are prefixed with a backslash. Tokens are matched left to right,
multi-character tokens first, so an already escaped sequence is never escaped
twice.
"""

from __future__ import annotations

import re as _std_re
from collections.abc import Callable, Mapping
from types import MappingProxyType


REGEX = "regex"
REGEX_WILDCARD = "regex-wildcard"
PCRE = "pcre"
PCRE_WILDCARD = "pcre-wildcard"
GETDIR = "getdir"
REPLACE = "replace"


class TranslationTable:
    """Immutable token substitution table with a precompiled tokenizer."""

    __slots__ = ("_name", "_replacements", "_escaped_chars", "_tokenizer")

    def __init__(self, name: str, replacements: Mapping[str, str], escaped_chars: str = "") -> None:
        self._name = name
        self._replacements = MappingProxyType(dict(replacements))
        self._escaped_chars = escaped_chars
        self._tokenizer = _std_re.compile(_token_pattern(self._replacements, escaped_chars))

    def __repr__(self) -> str:
        return f"TranslationTable({self._name!r}, tokens={len(self._replacements)}, escaped={self._escaped_chars!r})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def replacements(self) -> Mapping[str, str]:
        return self._replacements

    @property
    def escaped_chars(self) -> str:
        return self._escaped_chars

    def _substitute(self, match: _std_re.Match[str]) -> str:
        token = match.group(0)
        replacement = self._replacements.get(token)
        if replacement is None:
            return "\\" + token
        return replacement

    def translate(self, text: str) -> str:
        return self._tokenizer.sub(self._substitute, text)


def _token_pattern(replacements: Mapping[str, str], escaped_chars: str) -> str:
    tokens = sorted(replacements, key=len, reverse=True)
    alternatives = [_std_re.escape(token) for token in tokens]
    if escaped_chars:
        alternatives.append("[" + "".join(_std_re.escape(char) for char in escaped_chars) + "]")
    return "|".join(alternatives)


def build_regex_table() -> TranslationTable:
    # `?`, `{` and `}` are operators in the engines the output is handed to.
    return TranslationTable(
        REGEX,
        {
            r"\<": r"\\<",
            r"\>": r"\\>",
        },
        "\\*.^$|()+[]?{}",
    )


def build_regex_wildcard_table() -> TranslationTable:
    return TranslationTable(
        REGEX_WILDCARD,
        {
            r"\\": r"\\",
            r"\*": r"\*",
            r"\?": r"\?",
            "*": ".*",
            "?": ".",
            r"\<": r"\\<",
            r"\>": r"\\>",
        },
        "\\.^$|()+[]{}",
    )


def build_pcre_table() -> TranslationTable:
    return TranslationTable(
        PCRE,
        {
            r"\E": r"\E\\E\Q",
        },
    )


def build_pcre_wildcard_table() -> TranslationTable:
    # A lone backslash stays literal inside the quoted run.
    return TranslationTable(
        PCRE_WILDCARD,
        {
            r"\\": r"\E\\\Q",
            r"\E": r"\E\\E\Q",
            r"\*": "*",
            "*": r"\E.*\Q",
            r"\?": "?",
            "?": r"\E.\Q",
        },
    )


def build_getdir_table() -> TranslationTable:
    return TranslationTable(
        GETDIR,
        {
            r"\\": r"\\\\",
            r"\?": r"\\\?",
            r"\*": r"\\\*",
        },
        "\\?*",
    )


def build_replace_table() -> TranslationTable:
    replacements = {
        r"\\": r"\\\\",
        r"\&": r"\\\&",
    }
    for digit in "0123456789":
        replacements["\\" + digit] = "\\\\" + digit
    return TranslationTable(REPLACE, replacements, "\\&")


TABLE_BUILDERS: Mapping[str, Callable[[], TranslationTable]] = MappingProxyType(
    {
        REGEX: build_regex_table,
        REGEX_WILDCARD: build_regex_wildcard_table,
        PCRE: build_pcre_table,
        PCRE_WILDCARD: build_pcre_wildcard_table,
        GETDIR: build_getdir_table,
        REPLACE: build_replace_table,
    }
)


def dialect_table_key(pcre: bool, wildcard: bool) -> str:
    if pcre:
        return PCRE_WILDCARD if wildcard else PCRE
    return REGEX_WILDCARD if wildcard else REGEX


__all__ = [
    "TranslationTable",
    "TABLE_BUILDERS",
    "dialect_table_key",
    "REGEX",
    "REGEX_WILDCARD",
    "PCRE",
    "PCRE_WILDCARD",
    "GETDIR",
    "REPLACE",
]
