"""
Compiler cache maintenance and persistence for CI jobs.

Modules:
    stats: Predicates over ccache/sccache statistics output
    tool: Command-line wrapper around the cache binary
    uptime: Platform strategies for system uptime (eviction age)
    store: Cache store interface and directory-backed archive store
    save: The post-job save flow
"""

from .save import SaveResult, SaveStatus, compute_save_key, save_cache
from .stats import resolve_verbosity
from .store import ArchiveCacheStore, CacheStore
from .tool import CacheTool
from .uptime import (
    ProcUptimeProbe,
    SysctlUptimeProbe,
    UptimeProbe,
    select_uptime_probe,
)

__all__ = [
    "ArchiveCacheStore",
    "CacheStore",
    "CacheTool",
    "ProcUptimeProbe",
    "SaveResult",
    "SaveStatus",
    "SysctlUptimeProbe",
    "UptimeProbe",
    "compute_save_key",
    "resolve_verbosity",
    "save_cache",
    "select_uptime_probe",
]
