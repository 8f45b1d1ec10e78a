"""
System uptime probes.

Cache eviction uses the machine's uptime as an age threshold: on a fresh CI
runner anything not touched since boot was not used by this job. How uptime is
read depends on the platform, so each way is a separate strategy:

- ProcUptimeProbe: Linux and other systems exposing ``/proc/uptime``
- SysctlUptimeProbe: macOS/BSD, boot time from ``sysctl kern.boottime``

Usage:
    from ccachekit.caching.uptime import select_uptime_probe

    probe = select_uptime_probe()
    seconds = probe.uptime_seconds()
"""

import logging
import re
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Optional

from ..core.exceptions import UptimeProbeError
from ..core.platform import PlatformInfo, detect_platform
from ..core.shell import ShellRunner

logger = logging.getLogger(__name__)

BOOTTIME_PATTERN = re.compile(r"sec = (\d+)")


class UptimeProbe(ABC):
    """Strategy returning whole seconds since boot."""

    @abstractmethod
    def uptime_seconds(self) -> int:
        """
        Get system uptime.

        Returns:
            Seconds since boot, truncated to an integer

        Raises:
            UptimeProbeError: If the platform output cannot be parsed
        """
        pass


class ProcUptimeProbe(UptimeProbe):
    """Read uptime from the kernel's ``/proc/uptime`` pseudo-file."""

    def __init__(self, path: Path = Path("/proc/uptime")):
        self.path = Path(path)

    def uptime_seconds(self) -> int:
        data = self.path.read_text(encoding="utf-8")
        fields = data.split()
        try:
            uptime = int(float(fields[0]))
        except (IndexError, ValueError) as e:
            raise UptimeProbeError(
                f"Content {data!r} of {self.path} is not a valid uptime"
            ) from e

        logger.debug(f"Uptime from {self.path}: {uptime}s")
        return uptime


class SysctlUptimeProbe(UptimeProbe):
    """
    Derive uptime from the boot time reported by ``sysctl kern.boottime``.

    Example output:
        kern.boottime: { sec = 1714550400, usec = 123456 } Wed May  1 08:00:00 2024
    """

    COMMAND = "sysctl kern.boottime"

    def __init__(
        self,
        runner: Optional[ShellRunner] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.runner = runner or ShellRunner()
        self.clock = clock

    def boot_time(self) -> int:
        """Boot time as seconds since the epoch."""
        output = self.runner.capture(self.COMMAND, shell=False).stdout
        match = BOOTTIME_PATTERN.search(output)
        if not match:
            raise UptimeProbeError(f"Output {output} didn't match regex")
        return int(match.group(1))

    def uptime_seconds(self) -> int:
        boot_time = self.boot_time()
        uptime = max(0, int(self.clock() - boot_time))
        logger.debug(f"Booted at {boot_time}, uptime {uptime}s")
        return uptime


def select_uptime_probe(
    platform_info: Optional[PlatformInfo] = None,
    runner: Optional[ShellRunner] = None,
) -> UptimeProbe:
    """
    Pick the uptime strategy for a platform.

    Args:
        platform_info: Platform information. If None, auto-detect.
        runner: Runner used by command-based strategies

    Returns:
        SysctlUptimeProbe on macOS/BSD, ProcUptimeProbe otherwise
    """
    platform_info = platform_info or detect_platform()

    if platform_info.is_bsd_family:
        return SysctlUptimeProbe(runner)
    return ProcUptimeProbe()


__all__ = [
    "ProcUptimeProbe",
    "SysctlUptimeProbe",
    "UptimeProbe",
    "select_uptime_probe",
]
