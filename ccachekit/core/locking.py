"""
Concurrent access control for cache stores.

Several CI jobs on one machine may save into the same store directory. This
module provides file-based locks so that only one process writes an entry
for a given key at a time.

Usage:
    from ccachekit.core.locking import LockManager

    lock_manager = LockManager(store_root / ".locks")
    with lock_manager.entry_lock("ccache-linux-abc", timeout=30):
        # Safely create the entry
        pass
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from urllib.parse import quote

from filelock import FileLock, Timeout as LockTimeout

from .exceptions import CacheStoreError

logger = logging.getLogger(__name__)


def safe_name(key: str) -> str:
    """
    Percent-encode a cache key into a file name usable on every platform.

    Distinct keys always give distinct names.

    Example:
        >>> safe_name("ccache-linux-2024-05-01T12:00:00.000Z")
        'ccache-linux-2024-05-01T12%3A00%3A00.000Z'
    """
    return quote(key, safe="")


class LockManager:
    """
    Manages locks for cache store entries.

    Uses file-based locking with the `filelock` library for cross-platform
    compatibility and automatic cleanup on process death.

    Attributes:
        lock_dir: Directory where lock files are stored
    """

    def __init__(self, lock_dir: Path):
        self.lock_dir = Path(lock_dir)
        self.lock_dir.mkdir(parents=True, exist_ok=True)

    def lock_path(self, key: str) -> Path:
        """Lock file used for ``key``."""
        return self.lock_dir / f"entry-{safe_name(key)}.lock"

    @contextmanager
    def entry_lock(self, key: str, timeout: int = 30):
        """
        Acquire the lock for one cache entry.

        Args:
            key: Cache key being written
            timeout: Maximum wait time in seconds (default: 30)

        Raises:
            CacheStoreError: If lock can't be acquired within timeout
        """
        lock_path = self.lock_path(key)
        lock = FileLock(lock_path, timeout=timeout)

        try:
            with lock:
                logger.debug(f"Acquired entry lock: {lock_path}")
                yield
                logger.debug(f"Released entry lock: {lock_path}")
        except LockTimeout as e:
            raise CacheStoreError(
                f"Could not acquire lock for cache key {key} after {timeout}s. "
                "Another job may be saving this entry."
            ) from e


__all__ = ["LockManager", "safe_name"]
