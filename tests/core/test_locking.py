"""
Unit tests for the locking module.

Tests cover:
- Lock acquisition and release
- Timeout behavior
- Key sanitisation for lock and entry file names
"""

import pytest
from filelock import FileLock

from ccachekit.core.exceptions import CacheStoreError
from ccachekit.core.locking import LockManager, safe_name


class TestSafeName:
    @pytest.mark.parametrize(
        "key,expected",
        [
            ("ccache-linux-abc", "ccache-linux-abc"),
            ("k1-2024-05-01T12:00:00.000Z", "k1-2024-05-01T12%3A00%3A00.000Z"),
            ("a/b\\c", "a%2Fb%5Cc"),
            ("with space", "with%20space"),
            ("50%", "50%25"),
        ],
    )
    def test_safe_name(self, key, expected):
        assert safe_name(key) == expected

    def test_distinct_keys_stay_distinct(self):
        assert safe_name("ccache-linux:abc") != safe_name("ccache-linux-abc")


class TestLockManager:
    """Tests for LockManager class."""

    def test_init_creates_lock_dir(self, tmp_path):
        lock_dir = tmp_path / "store" / ".locks"

        manager = LockManager(lock_dir)

        assert manager.lock_dir == lock_dir
        assert lock_dir.is_dir()

    def test_lock_path(self, tmp_path):
        manager = LockManager(tmp_path)

        assert manager.lock_path("k:1") == tmp_path / "entry-k%3A1.lock"

    def test_entry_lock_acquire_and_release(self, tmp_path):
        manager = LockManager(tmp_path)

        with manager.entry_lock("k1", timeout=5):
            assert manager.lock_path("k1").exists()

        # Lock is free again afterwards
        with FileLock(manager.lock_path("k1"), timeout=0):
            pass

    def test_entry_lock_released_on_exception(self, tmp_path):
        manager = LockManager(tmp_path)

        with pytest.raises(RuntimeError):
            with manager.entry_lock("k1", timeout=5):
                raise RuntimeError("boom")

        with FileLock(manager.lock_path("k1"), timeout=0):
            pass

    def test_entry_lock_timeout(self, tmp_path):
        manager = LockManager(tmp_path)

        with FileLock(manager.lock_path("k1")):
            with pytest.raises(CacheStoreError, match="Another job may be saving"):
                with manager.entry_lock("k1", timeout=0.1):
                    pass

    def test_different_keys_do_not_block(self, tmp_path):
        manager = LockManager(tmp_path)

        with manager.entry_lock("k1", timeout=1):
            with manager.entry_lock("k2", timeout=1):
                pass
