"""Project-wide pytest configuration.

Every test starts from an empty translation table cache using the default
``"global"`` strategy, whatever strategy a previous test switched to.
"""

import pytest

import escape_string.cache as cache_mod


@pytest.fixture(autouse=True)
def _reset_table_cache():
    cache_mod.clear_cache()
    cache_mod.cache_strategy("global")
    try:
        yield
    finally:
        cache_mod.clear_cache()
        cache_mod.cache_strategy("global")
