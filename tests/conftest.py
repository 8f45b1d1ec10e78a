"""
Pytest configuration and shared fixtures for ccachekit tests.
"""

import logging

import pytest

from ccachekit.core.platform import PlatformInfo, clear_platform_cache
from ccachekit.core.state import JobState
from tests.fixtures.stats_output import (
    CCACHE3_HELP,
    CCACHE4_HELP,
    CCACHE4_STATS,
    CCACHE4_VERBOSE_STATS,
)
from tests.utils.mocks import FakeRunner, RecordingStore


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests that need real ccache/sccache binaries",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --integration flag is provided."""
    if config.getoption("--integration"):
        return

    skip_integration = pytest.mark.skip(reason="need --integration option to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture(autouse=True)
def _reset_platform_cache():
    """Platform detection is cached per process; isolate tests from each other."""
    clear_platform_cache()
    yield
    clear_platform_cache()


@pytest.fixture
def debug_logs(caplog):
    """Capture records of every level."""
    caplog.set_level(logging.DEBUG)
    return caplog


@pytest.fixture
def linux_platform():
    return PlatformInfo(os="linux")


@pytest.fixture
def macos_platform():
    return PlatformInfo(os="macos")


@pytest.fixture
def ccache_state():
    """State recorded by a completed ccache setup with saving enabled."""
    return JobState(
        variant="ccache",
        primary_key="k1",
        clean_unused=False,
        should_save=True,
        append_timestamp=False,
    )


@pytest.fixture
def ccache_runner():
    """Runner answering like ccache 4.x with a populated cache."""
    return FakeRunner(
        {
            "ccache --help": CCACHE4_HELP,
            "ccache -s": CCACHE4_STATS,
            "ccache -s -v": CCACHE4_VERBOSE_STATS,
        }
    )


@pytest.fixture
def legacy_ccache_runner():
    """Runner answering like ccache 3.x, which has no --verbose flag."""
    return FakeRunner({"ccache --help": CCACHE3_HELP})


@pytest.fixture
def store():
    return RecordingStore()
