# SPDX-FileCopyrightText: 2025 ModelCloud.ai
# SPDX-FileCopyrightText: 2025 qubitium@modelcloud.ai
# SPDX-License-Identifier: Apache-2.0
# Contact: qubitium@modelcloud.ai, x.com/qubitium

"""Exceptions raised when :func:`escape_string.compile_pattern` is misused."""

from __future__ import annotations


class EscapeError(Exception):
    """Base class for configuration errors detected before escaping starts."""


class InvalidModeCombination(EscapeError, ValueError):
    """An exclusive literal mode was combined with another flag."""


class InvalidInputType(EscapeError, TypeError):
    """The value to escape is neither a string nor a list of strings."""


class InvalidModeType(EscapeError, TypeError):
    """The mode argument is not an int, a :class:`Mode`, or an iterable of those."""


__all__ = [
    "EscapeError",
    "InvalidModeCombination",
    "InvalidInputType",
    "InvalidModeType",
]
