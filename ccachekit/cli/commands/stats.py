"""
Stats command implementation.

Prints the cache size lines of a cache tool and whether its cache is empty,
the same checks the save flow relies on.
"""

import logging

from ccachekit.caching.tool import CacheTool
from ccachekit.core.exceptions import CcacheKitError

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the stats command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 if the tool could not be queried)
    """
    tool = CacheTool(args.variant)

    try:
        verbose_capable = tool.supports_verbose_flag()
        tool.print_cache_size()
        empty = tool.is_empty(verbose_capable)
    except (CcacheKitError, OSError) as e:
        logger.error(f"Failed to query {args.variant}: {e}")
        return 1

    print(f"{args.variant} supports --verbose: {'yes' if verbose_capable else 'no'}")
    print(f"{args.variant} cache empty: {'yes' if empty else 'no'}")
    return 0
