# SPDX-FileCopyrightText: 2025 ModelCloud.ai
# SPDX-FileCopyrightText: 2025 qubitium@modelcloud.ai
# SPDX-License-Identifier: Apache-2.0
# Contact: qubitium@modelcloud.ai, x.com/qubitium

"""Build safe pattern text from untrusted strings.

This package turns raw text, or a list of alternatives, into a traditional
regular expression, a PCRE, a literal replacement template, or a glob-safe
name. It only constructs pattern text; matching is left to whichever regex
engine the caller hands the result to.
"""

from __future__ import annotations

from .cache import cache_info, cache_strategy
from .compiler import (
    clear_cache,
    compile_pattern,
    configure,
    escape_literal,
    escape_string,
    expand_case,
)
from .errors import EscapeError, InvalidInputType, InvalidModeCombination, InvalidModeType
from .flags import (
    ESCAPE_ANY,
    ESCAPE_CASE,
    ESCAPE_EXACT,
    ESCAPE_GETDIR,
    ESCAPE_LIST,
    ESCAPE_NOCASE,
    ESCAPE_PCRE,
    ESCAPE_REGEXP,
    ESCAPE_REPLACE,
    ESCAPE_WILDCARD,
    ESCAPE_WORD,
    Mode,
)


__version__ = "0.1.0"

purge = clear_cache
error = EscapeError


__all__ = [
    "Mode",
    "compile_pattern",
    "escape_string",
    "escape_literal",
    "expand_case",
    "configure",
    "clear_cache",
    "purge",
    "cache_info",
    "cache_strategy",
    "EscapeError",
    "InvalidModeCombination",
    "InvalidInputType",
    "InvalidModeType",
    "error",
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
]
