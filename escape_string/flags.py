# SPDX-FileCopyrightText: 2025 ModelCloud.ai
# SPDX-FileCopyrightText: 2025 qubitium@modelcloud.ai
# SPDX-License-Identifier: Apache-2.0
# Contact: qubitium@modelcloud.ai, x.com/qubitium

"""Mode flags accepted by :func:`escape_string.compile_pattern`."""

from __future__ import annotations

from enum import IntFlag


class Mode(IntFlag):
    """Pythonic IntFlag aliases for the escape mode bits."""

    REGEX = 1
    PCRE = 2
    GETDIR_LITERAL = 4
    ANY = 8
    WORD = 16
    CASE_SENSITIVE = 32
    CASE_INSENSITIVE = 64
    WILDCARD = 128
    EXACT = 256
    REPLACE_LITERAL = 512
    LIST = 1024


ESCAPE_REGEXP = Mode.REGEX
ESCAPE_PCRE = Mode.PCRE
ESCAPE_GETDIR = Mode.GETDIR_LITERAL
ESCAPE_ANY = Mode.ANY
ESCAPE_WORD = Mode.WORD
ESCAPE_CASE = Mode.CASE_SENSITIVE
ESCAPE_NOCASE = Mode.CASE_INSENSITIVE
ESCAPE_WILDCARD = Mode.WILDCARD
ESCAPE_EXACT = Mode.EXACT
ESCAPE_REPLACE = Mode.REPLACE_LITERAL
ESCAPE_LIST = Mode.LIST

# Modes that must be passed on their own and only accept a single string.
EXCLUSIVE_MODES = (Mode.GETDIR_LITERAL, Mode.REPLACE_LITERAL)

ALL_MODE_BITS = 0
for _flag in Mode:
    ALL_MODE_BITS |= int(_flag)


__all__ = [
    "Mode",
    "ESCAPE_REGEXP",
    "ESCAPE_PCRE",
    "ESCAPE_GETDIR",
    "ESCAPE_ANY",
    "ESCAPE_WORD",
    "ESCAPE_CASE",
    "ESCAPE_NOCASE",
    "ESCAPE_WILDCARD",
    "ESCAPE_EXACT",
    "ESCAPE_REPLACE",
    "ESCAPE_LIST",
    "EXCLUSIVE_MODES",
    "ALL_MODE_BITS",
]
