# SPDX-FileCopyrightText: 2025 ModelCloud.ai
# SPDX-FileCopyrightText: 2025 qubitium@modelcloud.ai
# SPDX-License-Identifier: Apache-2.0
# Contact: qubitium@modelcloud.ai, x.com/qubitium

from __future__ import annotations

import re
from pathlib import Path

from setuptools import find_packages, setup


ROOT_DIR = Path(__file__).resolve().parent
VERSION_PATTERN = re.compile(r'^__version__ = "([^"]+)"$', re.MULTILINE)


def _read_version() -> str:
    source = (ROOT_DIR / "escape_string" / "__init__.py").read_text(encoding="utf-8")
    match = VERSION_PATTERN.search(source)
    if match is None:
        raise RuntimeError("unable to find __version__ in escape_string/__init__.py")
    return match.group(1)


TEST_REQUIREMENTS = [
    "pytest",
    "regex",
    "tabulate",
]


setup(
    name="PyEscapeString",
    version=_read_version(),
    description="Escape untrusted text into regex, PCRE, replacement and glob-safe patterns.",
    license="Apache-2.0",
    python_requires=">=3.10",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=[],
    extras_require={
        "test": TEST_REQUIREMENTS,
        "pcre": ["PyPcre"],
    },
)
