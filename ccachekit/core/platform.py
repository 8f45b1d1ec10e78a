"""
Platform detection for ccachekit.

Detects the operating system family so that platform-dependent probes (such
as system uptime) can pick the right strategy.

Usage:
    from ccachekit.core.platform import detect_platform

    if detect_platform().is_bsd_family:
        print("boot time comes from sysctl")
"""

import functools
import platform
from dataclasses import dataclass


@dataclass
class PlatformInfo:
    """
    Platform information.

    Attributes:
        os: Operating system ('linux', 'macos', 'freebsd', 'windows', ...)
    """

    os: str

    @property
    def is_bsd_family(self) -> bool:
        """True for systems that expose boot time through sysctl."""
        return self.os in ("macos", "freebsd")


@functools.lru_cache(maxsize=1)
def detect_platform() -> PlatformInfo:
    """
    Detect current platform information.

    This function is cached - it only runs detection once per process.
    """
    return PlatformInfo(os=_detect_os())


def _detect_os() -> str:
    """Normalized OS name. Unknown systems are returned lowercased as reported."""
    system = platform.system().lower()

    if system == "darwin":
        return "macos"
    return system


def clear_platform_cache():
    """Clear the platform detection cache."""
    detect_platform.cache_clear()


__all__ = [
    "PlatformInfo",
    "detect_platform",
    "clear_platform_cache",
]
