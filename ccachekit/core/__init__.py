"""
Core infrastructure for ccachekit.

Modules:
    exceptions: Exception hierarchy
    platform: Operating system family detection
    shell: Capturing and streaming cache tool commands
    state: Job state recorded by the setup phase
    locking: File locks guarding cache store entries
    workflow_log: Logging rendered as CI workflow commands
"""

from .exceptions import (
    CacheEntryExistsError,
    CacheStoreError,
    CcacheKitError,
    CommandFailedError,
    ConfigurationError,
    UptimeProbeError,
)
from .platform import PlatformInfo, detect_platform
from .shell import CommandResult, ShellRunner
from .state import JobState

__all__ = [
    "CacheEntryExistsError",
    "CacheStoreError",
    "CcacheKitError",
    "CommandFailedError",
    "CommandResult",
    "ConfigurationError",
    "JobState",
    "PlatformInfo",
    "ShellRunner",
    "UptimeProbeError",
    "detect_platform",
]
