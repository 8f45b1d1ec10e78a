"""
Post-job cache save flow.

Runs at the end of a CI job after the setup phase configured ccache or
sccache:

1. Skip entirely when setup never recorded a tool and key.
2. Probe whether the tool supports ``--verbose``.
3. Optionally evict entries unused during this job (uptime as age limit).
4. Print the statistics report.
5. Persist the cache directory unless saving is disabled or the cache is empty.

A failure in any step is logged as a single warning and reported through the
returned SaveResult; it never propagates, because a missing cache upload must
not fail the build.

Usage:
    from ccachekit.caching.save import save_cache
    from ccachekit.caching.store import ArchiveCacheStore
    from ccachekit.core.state import JobState

    result = save_cache(JobState.from_env(), ArchiveCacheStore(store_dir))
    if result.recovered:
        print(f"save failed: {result.error}")
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from ..core.shell import ShellRunner
from ..core.state import JobState
from ..core.workflow_log import NOTICE, log_group
from .stats import resolve_verbosity
from .store import CacheStore
from .tool import CacheTool
from .uptime import UptimeProbe, select_uptime_probe

logger = logging.getLogger(__name__)


class SaveStatus(Enum):
    """How the save flow ended."""

    SAVED = "saved"
    SKIPPED = "skipped"
    RECOVERED = "recovered"


@dataclass
class SaveResult:
    """
    Outcome of the save flow.

    Attributes:
        status: SAVED, SKIPPED or RECOVERED (an error was turned into a warning)
        key: Key the cache was saved under, when saved
        reason: Why the save was skipped
        error: Description of the recovered error
        work_pending: Whether background work is still running; the host may
            terminate the process early when this is False
    """

    status: SaveStatus
    key: Optional[str] = None
    reason: Optional[str] = None
    error: Optional[str] = None
    work_pending: bool = False

    @property
    def saved(self) -> bool:
        return self.status is SaveStatus.SAVED

    @property
    def recovered(self) -> bool:
        return self.status is SaveStatus.RECOVERED


def timestamp_suffix(now: Optional[datetime] = None) -> str:
    """
    ISO-8601 UTC timestamp with millisecond precision.

    Example:
        >>> timestamp_suffix(datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc))
        '2024-05-01T12:00:00.000Z'
    """
    now = now or datetime.now(timezone.utc)
    now = now.astimezone(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def compute_save_key(
    primary_key: str, append_timestamp: bool, now: Optional[datetime] = None
) -> str:
    """
    Key the cache is saved under.

    Args:
        primary_key: Key recorded by the setup phase
        append_timestamp: Suffix the key with the current time
        now: Time used for the suffix (default: current time)
    """
    if append_timestamp:
        return primary_key + timestamp_suffix(now)

    logger.debug(
        "Not appending timestamp because 'append-timestamp' is not set to 'true'."
    )
    return primary_key


def clean_unused(tool: CacheTool, uptime_probe: UptimeProbe) -> None:
    """Evict entries that were not used since the machine booted."""
    with log_group(logger, f"{tool.variant} cleanUnused"):
        logger.info("Cleaning cache that hasn't been used during this job")
        logger.info("Size before cleaning:")
        tool.print_cache_size()
        uptime = uptime_probe.uptime_seconds()
        tool.evict_older_than(uptime)
        logger.info("Cleaned cache ! New cache size:")
        tool.print_cache_size()


def save_cache(
    state: JobState,
    store: CacheStore,
    runner: Optional[ShellRunner] = None,
    uptime_probe: Optional[UptimeProbe] = None,
    now: Optional[datetime] = None,
) -> SaveResult:
    """
    Run the post-job save flow.

    Args:
        state: Values recorded by the setup phase plus user inputs
        store: Collaborator persisting the cache directory
        runner: Runner for tool commands (default: ShellRunner())
        uptime_probe: Uptime strategy (default: chosen for the platform)
        now: Time used for the key timestamp (default: time of saving)

    Returns:
        SaveResult describing the outcome. Never raises for flow failures.
    """
    if not state.is_complete:
        logger.log(NOTICE, "ccache setup failed, skipping saving.")
        return SaveResult(SaveStatus.SKIPPED, reason="setup incomplete")

    try:
        return _run(state, store, runner or ShellRunner(), uptime_probe, now)
    except Exception as e:
        # A failure to save cache shouldn't fail the CI run
        logger.warning(f"Saving cache failed: {e}")
        return SaveResult(SaveStatus.RECOVERED, error=str(e))


def _run(
    state: JobState,
    store: CacheStore,
    runner: ShellRunner,
    uptime_probe: Optional[UptimeProbe],
    now: Optional[datetime],
) -> SaveResult:
    tool = CacheTool(state.variant, runner)

    verbose_capable = tool.supports_verbose_flag()
    verbosity = resolve_verbosity(state.verbose) if verbose_capable else ""

    # Clean before showing stats so they describe the cache that gets saved
    if state.clean_unused:
        clean_unused(tool, uptime_probe or select_uptime_probe(runner=runner))
    else:
        logger.info("Cache cleaning not enabled, skipped")

    with log_group(logger, f"{tool.variant} stats"):
        tool.show_stats(verbosity)

    if not state.should_save:
        logger.info("Not saving cache because 'save' is set to 'false'.")
        return SaveResult(SaveStatus.SKIPPED, reason="save disabled")

    if tool.is_empty(verbose_capable):
        logger.info("Not saving cache because no objects are cached.")
        return SaveResult(SaveStatus.SKIPPED, reason="cache empty")

    save_key = compute_save_key(state.primary_key, state.append_timestamp, now)
    logger.info(f'Save cache using key "{save_key}".')
    store.save(state.cache_paths, save_key)

    return SaveResult(SaveStatus.SAVED, key=save_key)


__all__ = [
    "SaveResult",
    "SaveStatus",
    "clean_unused",
    "compute_save_key",
    "save_cache",
    "timestamp_suffix",
]
