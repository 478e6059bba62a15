# SPDX-FileCopyrightText: 2025 ModelCloud.ai
# SPDX-FileCopyrightText: 2025 qubitium@modelcloud.ai
# SPDX-License-Identifier: Apache-2.0
# Contact: qubitium@modelcloud.ai, x.com/qubitium

"""High level operations for the :mod:`escape_string` package."""

from __future__ import annotations

import re as _std_re
from collections.abc import Iterable, Sequence
from typing import Any, List, Tuple

from . import tables as _tables
from .cache import cache_strategy as _cache_strategy
from .cache import cached_table
from .cache import clear_cache as _clear_cache
from .errors import InvalidInputType, InvalidModeCombination, InvalidModeType
from .flags import ALL_MODE_BITS, EXCLUSIVE_MODES, Mode


FlagInput = int | Mode | Iterable[int | Mode]
ValueInput = str | Sequence[str]

_LIST_SEPARATOR = _std_re.compile(r"\s*,\s*")
_ALPHA_RUN = _std_re.compile(r"[A-Za-z]+")

_LITERAL_ESCAPERS: dict[Mode, str] = {
    Mode.GETDIR_LITERAL: _tables.GETDIR,
    Mode.REPLACE_LITERAL: _tables.REPLACE,
}

_PCRE_ALTERNATION = r"\E|\Q"

_REGEX_WORD = (r"\<", r"\>")
_PCRE_WORD = (r"\b", r"\b")
_EXACT = ("^", "$")
_UNANCHORED = ("", "")


def _coerce_single_mode(flag: Any) -> int:
    if isinstance(flag, int):
        return int(flag)
    raise InvalidModeType("mode must be ints, Mode values, or iterables thereof")


def _normalise_mode(mode: FlagInput) -> int:
    if isinstance(mode, int):
        resolved = int(mode)
    elif isinstance(mode, (str, bytes, bytearray)):
        raise InvalidModeType("mode must be an int, a Mode value, or an iterable of those")
    elif isinstance(mode, Iterable):
        resolved = 0
        for flag in mode:
            resolved |= _coerce_single_mode(flag)
    else:
        raise InvalidModeType(
            f"mode must be an int, a Mode value, or an iterable of those, not {type(mode).__name__}"
        )

    unknown_bits = resolved & ~ALL_MODE_BITS
    if unknown_bits:
        raise InvalidModeType(f"mode contains unknown bits {unknown_bits:#x}")
    return resolved


def _check_exclusive_modes(value: Any, mode: int) -> None:
    for exclusive in EXCLUSIVE_MODES:
        if not mode & exclusive:
            continue
        if mode != exclusive:
            raise InvalidModeCombination(f"bad mode: {exclusive.name} must be passed exclusively")
        if not isinstance(value, str):
            raise InvalidInputType(
                f"bad value: {exclusive.name} requires a string, not {type(value).__name__}"
            )


def _normalise_items(value: Any, mode: int) -> Tuple[List[str], int]:
    """Turn *value* into the ordered list of literal items to escape.

    A list input forces list semantics, so the returned mode always carries
    ``Mode.LIST`` in that case.
    """

    if isinstance(value, str):
        if not mode & Mode.LIST:
            return [value], mode
        fragments = (fragment.strip() for fragment in _LIST_SEPARATOR.split(value))
        return [fragment for fragment in fragments if fragment], mode

    if isinstance(value, (list, tuple)):
        items: List[str] = []
        for element in value:
            if not isinstance(element, str):
                raise InvalidInputType(f"list elements must be strings, not {type(element).__name__}")
            element = element.strip()
            if element:
                items.append(element)
        return items, mode | Mode.LIST

    raise InvalidInputType(f"value must be a string or a list of strings, not {type(value).__name__}")


def _translate(items: List[str], key: str) -> List[str]:
    table = cached_table(key, _tables.TABLE_BUILDERS[key])
    return [table.translate(item) for item in items]


def _letter_classes(match: _std_re.Match[str]) -> str:
    return "".join(f"[{char.upper()}{char.lower()}]" for char in match.group(0))


def expand_case(item: str) -> str:
    """Replace every ASCII letter in an escaped *item* with an ``[Xx]`` class."""

    return _ALPHA_RUN.sub(_letter_classes, item)


def _scope(mode: int, word: Tuple[str, str]) -> Tuple[str, str]:
    if mode & Mode.EXACT:
        return _EXACT
    if mode & Mode.WORD:
        return word
    return _UNANCHORED


def _assemble_pcre(items: List[str], mode: int) -> str:
    translated = _translate(items, _tables.dialect_table_key(True, bool(mode & Mode.WILDCARD)))
    open_, close = _scope(mode, _PCRE_WORD)
    nocase = "(?i)" if mode & Mode.CASE_INSENSITIVE else ""
    return f"{open_}({nocase}\\Q{_PCRE_ALTERNATION.join(translated)}\\E){close}"


def _assemble_regex(items: List[str], mode: int) -> str:
    translated = _translate(items, _tables.dialect_table_key(False, bool(mode & Mode.WILDCARD)))
    if mode & Mode.CASE_INSENSITIVE:
        translated = [expand_case(item) for item in translated]
    open_, close = _scope(mode, _REGEX_WORD)
    return f"{open_}({'|'.join(translated)}){close}"


def escape_literal(value: str, mode: int) -> str:
    """Apply the GetDirLiteral or ReplaceLiteral escaper selected by *mode*."""

    try:
        key = _LITERAL_ESCAPERS[Mode(mode)]
    except (KeyError, ValueError) as exc:
        raise InvalidModeCombination(f"bad mode: {mode!r} is not a literal escaping mode") from exc
    table = cached_table(key, _tables.TABLE_BUILDERS[key])
    return table.translate(value)


def compile_pattern(value: ValueInput, mode: FlagInput = 0) -> str | None:
    """Build a pattern string matching *value* according to *mode*.

    *value* is a string or a list of strings. ``Mode.LIST`` splits a string on
    commas; a list always counts as a list of alternatives. Returns ``None``
    when the list of alternatives is empty.

    ``Mode.GETDIR_LITERAL`` and ``Mode.REPLACE_LITERAL`` must be passed on
    their own with a single string and return the escaped string directly.
    """

    resolved = _normalise_mode(mode)
    _check_exclusive_modes(value, resolved)

    if resolved in _LITERAL_ESCAPERS:
        return escape_literal(value, resolved)

    items, resolved = _normalise_items(value, resolved)
    if not items:
        return None

    if resolved & Mode.PCRE:
        return _assemble_pcre(items, resolved)
    return _assemble_regex(items, resolved)


def escape_string(value: ValueInput, mode: FlagInput = 0) -> str | None:
    """Alias of :func:`compile_pattern` under its traditional name."""

    return compile_pattern(value, mode)


def configure(*, cache_strategy: str | None = None) -> str:
    """Adjust global defaults for the escaping engine.

    Returns the effective table cache strategy after applying any updates.
    """

    return _cache_strategy(cache_strategy)


def clear_cache() -> None:
    """Clear the translation table cache."""

    _clear_cache()
