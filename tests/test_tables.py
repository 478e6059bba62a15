# SPDX-FileCopyrightText: 2025 ModelCloud.ai
# SPDX-FileCopyrightText: 2025 qubitium@modelcloud.ai
# SPDX-License-Identifier: Apache-2.0
# Contact: qubitium@modelcloud.ai, x.com/qubitium

from __future__ import annotations

import pytest

from escape_string import expand_case
from escape_string import tables


def test_dialect_table_keys() -> None:
    assert tables.dialect_table_key(False, False) == tables.REGEX
    assert tables.dialect_table_key(False, True) == tables.REGEX_WILDCARD
    assert tables.dialect_table_key(True, False) == tables.PCRE
    assert tables.dialect_table_key(True, True) == tables.PCRE_WILDCARD


@pytest.mark.parametrize("key", sorted(tables.TABLE_BUILDERS))
def test_builders_produce_named_tables(key: str) -> None:
    table = tables.TABLE_BUILDERS[key]()

    assert table.name == key
    assert key in repr(table)


def test_tables_are_read_only() -> None:
    table = tables.build_regex_wildcard_table()

    with pytest.raises(TypeError):
        table.replacements["*"] = "+"  # type: ignore[index]
    with pytest.raises(TypeError):
        tables.TABLE_BUILDERS["extra"] = tables.build_regex_table  # type: ignore[index]


def test_escaped_tokens_win_over_single_characters() -> None:
    table = tables.TranslationTable("probe", {r"\*": "STAR", "*": "ANY"}, "\\")

    assert table.translate(r"a\*b*c\d") == r"aSTARbANYc\\d"


def test_unmapped_escaped_chars_get_backslash_prefix() -> None:
    table = tables.build_regex_table()

    assert table.translate("a.b|c") == r"a\.b\|c"
    assert table.translate("plain") == "plain"


def test_replace_table_covers_every_backreference_digit() -> None:
    table = tables.build_replace_table()

    for digit in "0123456789":
        assert table.translate("\\" + digit) == "\\\\" + digit


def test_expand_case_runs() -> None:
    assert expand_case("ab") == "[Aa][Bb]"
    assert expand_case(r"a\.B1c") == r"[Aa]\.[Bb]1[Cc]"
    assert expand_case("123") == "123"
