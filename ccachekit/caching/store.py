"""
Cache store collaborators.

The save flow hands a list of directories and a key to a CacheStore, which
persists their contents for later retrieval by key. Uploading to a hosted
cache service is the job of the CI platform; this module defines the
interface and a store that keeps entries as archives in a directory, which
serves self-hosted runners sharing a disk and local runs.

Usage:
    from pathlib import Path
    from ccachekit.caching.store import ArchiveCacheStore

    store = ArchiveCacheStore(Path("/var/cache/ci-ccache"))
    store.save([".ccache"], "ccache-linux-2024-05-01T12:00:00.000Z")
"""

import logging
import os
import tarfile
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Sequence

from ..core.exceptions import CacheEntryExistsError, CacheStoreError
from ..core.locking import LockManager, safe_name

logger = logging.getLogger(__name__)


class CacheStore(ABC):
    """Interface for persisting cache directories under a key."""

    @abstractmethod
    def save(self, paths: Sequence[str], key: str) -> Optional[Path]:
        """
        Persist the contents of ``paths`` under ``key``.

        Args:
            paths: Directories to persist, in order
            key: Entry identifier

        Returns:
            Location of the stored entry, if the store has one

        Raises:
            CacheStoreError: If the entry cannot be stored
        """
        pass


class ArchiveCacheStore(CacheStore):
    """
    Store each entry as a gzip tarball in a directory.

    Entries are immutable: saving a key that already exists fails. Writes go
    through a temporary file and a rename, under a per-key file lock.

    Attributes:
        root: Directory holding the archives
        working_dir: Base for relative paths (default: current directory)
        lock_timeout: Seconds to wait for another writer of the same key
    """

    ARCHIVE_SUFFIX = ".tar.gz"

    def __init__(
        self,
        root: Path,
        working_dir: Optional[Path] = None,
        lock_timeout: int = 30,
    ):
        self.root = Path(root)
        self.working_dir = Path(working_dir) if working_dir else None
        self.lock_timeout = lock_timeout

    def entry_path(self, key: str) -> Path:
        """Archive location for ``key``."""
        return self.root / f"{safe_name(key)}{self.ARCHIVE_SUFFIX}"

    def contains(self, key: str) -> bool:
        """Check whether an entry exists for ``key``."""
        return self.entry_path(key).exists()

    def save(self, paths: Sequence[str], key: str) -> Path:
        sources = self._existing_sources(paths)

        self.root.mkdir(parents=True, exist_ok=True)
        lock_manager = LockManager(self.root / ".locks")

        with lock_manager.entry_lock(key, timeout=self.lock_timeout):
            entry = self.entry_path(key)
            if entry.exists():
                raise CacheEntryExistsError(key)

            self._write_archive(entry, sources)

        logger.info(
            f"Cache saved with key: {key} ({entry.stat().st_size} bytes at {entry})"
        )
        return entry

    def _existing_sources(self, paths: Sequence[str]) -> List[tuple]:
        """Resolve paths, keeping (filesystem path, archive name) for existing ones."""
        base = self.working_dir or Path.cwd()
        sources = []

        for path_str in paths:
            path = Path(path_str)
            resolved = path if path.is_absolute() else base / path
            if not resolved.exists():
                logger.debug(f"Skipping missing cache path: {resolved}")
                continue
            arcname = path.name if path.is_absolute() else path.as_posix()
            sources.append((resolved, arcname))

        if not sources:
            raise CacheStoreError(
                "Path Validation Error: Path(s) specified for caching do not exist, "
                "hence no cache is being saved."
            )
        return sources

    def _write_archive(self, entry: Path, sources: List[tuple]) -> None:
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=self.root, prefix=f".{entry.name}.", suffix=".tmp"
        )
        temp_path = Path(temp_path_str)
        os.close(temp_fd)

        try:
            with tarfile.open(temp_path, "w:gz") as tar:
                for resolved, arcname in sources:
                    logger.debug(f"Archiving {resolved} as {arcname}")
                    tar.add(resolved, arcname=arcname)

            # Atomic rename (same filesystem as the destination)
            temp_path.replace(entry)

        except (OSError, tarfile.TarError) as e:
            temp_path.unlink(missing_ok=True)
            raise CacheStoreError(f"Failed to write cache archive {entry}: {e}") from e


__all__ = ["ArchiveCacheStore", "CacheStore"]
