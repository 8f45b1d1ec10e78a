"""
Pattern matching over cache tool statistics output.

ccache and sccache print human-readable statistics whose layout changes
between releases. Each question asked of that text is isolated here as a
small predicate so it can be tested against captured output.

Example ccache (4.x, ``ccache -s -v``) output:
    Cache directory:    /home/runner/.ccache
    ...
    Local storage:
      Cache size (GB):  0.1 / 5.0 ( 2.31%)
      Files:             312

Example ccache (3.x, ``ccache -s``) output:
    cache directory                     /home/runner/.ccache
    files in cache                         0
    cache size                           0.0 kB

Example sccache (``sccache -s``) output:
    Cache location                  Local disk: "/home/runner/.sccache"
    Cache size                            0 bytes
    Max cache size                       10 GiB
"""

import logging
import re
from typing import List

logger = logging.getLogger(__name__)

CCACHE_VERBOSE_EMPTY_PATTERN = re.compile(r"Files:.+\b0\b")
CCACHE_EMPTY_PATTERN = re.compile(r"files in cache.+\b0\b")
SCCACHE_EMPTY_PATTERN = re.compile(r"Cache size.+\b0 bytes")

VERBOSITY_FLAGS = {
    "0": "",
    "1": " -v",
    "2": " -vv",
}


def ccache_verbose_stats_empty(stats: str) -> bool:
    """Check ``ccache -s -v`` output for a zero file count."""
    return CCACHE_VERBOSE_EMPTY_PATTERN.search(stats) is not None


def ccache_stats_empty(stats: str) -> bool:
    """Check ``ccache -s`` output (tools without --verbose) for a zero file count."""
    return CCACHE_EMPTY_PATTERN.search(stats) is not None


def sccache_stats_empty(stats: str) -> bool:
    """Check ``sccache -s`` output for a zero-byte cache."""
    return SCCACHE_EMPTY_PATTERN.search(stats) is not None


def cache_size_lines(stats: str) -> List[str]:
    """
    Select the lines that report cache size.

    Example:
        >>> cache_size_lines("Hits: 3\\nCache size (GB): 0.1 / 5.0\\n")
        ['Cache size (GB): 0.1 / 5.0']
    """
    return [line for line in stats.split("\n") if "cache size" in line.lower()]


def resolve_verbosity(setting: str) -> str:
    """
    Map the ``verbose`` input to a stats command flag suffix.

    Args:
        setting: "0", "1" or "2"

    Returns:
        "", " -v" or " -vv". Unknown settings log a warning and return "".
    """
    flag = VERBOSITY_FLAGS.get(setting)
    if flag is None:
        logger.warning(f'Invalid value "{setting}" of "verbose" option ignored.')
        return ""
    return flag


__all__ = [
    "cache_size_lines",
    "ccache_stats_empty",
    "ccache_verbose_stats_empty",
    "resolve_verbosity",
    "sccache_stats_empty",
]
