"""
Centralized exception hierarchy for ccachekit.

This module defines all custom exceptions used across the codebase
to provide clear exception semantics.
"""

from typing import Optional


# ============================================================================
# Base Exceptions
# ============================================================================


class CcacheKitError(Exception):
    """Base exception for all ccachekit errors."""

    pass


# ============================================================================
# Process Execution Exceptions
# ============================================================================


class CommandFailedError(CcacheKitError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, command: str, returncode: int, stderr: Optional[str] = None):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr or ""
        msg = f'Command "{command}" failed with exit code {returncode}'
        if self.stderr.strip():
            msg += f": {self.stderr.strip()}"
        super().__init__(msg)


class UptimeProbeError(CcacheKitError):
    """Raised when system uptime cannot be determined."""

    pass


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(CcacheKitError):
    """Raised when a configuration file is missing or malformed."""

    pass


# ============================================================================
# Cache Store Exceptions
# ============================================================================


class CacheStoreError(CcacheKitError):
    """Base exception for cache store errors."""

    pass


class CacheEntryExistsError(CacheStoreError):
    """Raised when saving under a key that already has an entry."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Cache entry already exists for key: {key}")
