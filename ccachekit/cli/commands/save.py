"""
Save command implementation.

Runs the post-job cache save flow. The command always exits with 0: a cache
that could not be saved is reported as a warning and never fails the job.
"""

import logging
import os

from ccachekit.caching.save import save_cache
from ccachekit.caching.store import ArchiveCacheStore
from ccachekit.cli.utils import resolve_store_dir
from ccachekit.core.exceptions import ConfigurationError
from ccachekit.core.state import JobState

logger = logging.getLogger(__name__)


def load_state(args) -> JobState:
    """Read job state from --config when given, else from the environment."""
    if args.config:
        return JobState.from_config_file(args.config)
    return JobState.from_env()


def exit_early() -> None:
    """Terminate without running interpreter teardown."""
    logging.shutdown()
    os._exit(0)


def run(args) -> int:
    """
    Run the save command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (always 0)
    """
    logger.debug(f"Arguments: {args}")

    try:
        state = load_state(args)
    except ConfigurationError as e:
        logger.warning(f"Saving cache failed: {e}")
        return 0

    store_dir = resolve_store_dir(args.store_dir, args.project_root)
    store = ArchiveCacheStore(store_dir, working_dir=args.project_root)

    result = save_cache(state, store)
    logger.debug(f"Save finished: {result}")

    # Nothing is left running once the flow returns
    if args.early_exit and not result.work_pending:
        exit_early()

    return 0
