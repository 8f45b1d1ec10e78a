"""
Integration tests running an installed ccache binary.

Run with ``pytest --integration``.
"""

import shutil

import pytest

from ccachekit.caching.tool import CacheTool

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(shutil.which("ccache") is None, reason="ccache not installed"),
]


@pytest.fixture
def ccache(tmp_path, monkeypatch):
    monkeypatch.setenv("CCACHE_DIR", str(tmp_path / "ccache"))
    return CacheTool("ccache")


def test_fresh_cache_is_empty(ccache):
    verbose_capable = ccache.supports_verbose_flag()

    assert ccache.is_empty(verbose_capable)


def test_stats_report_cache_size(ccache):
    assert "cache size" in ccache.stats().lower()


def test_evict_succeeds_on_empty_cache(ccache):
    ccache.evict_older_than(60)
