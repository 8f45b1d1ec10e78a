"""
Statistics and help output captured from ccache and sccache releases.
"""

CCACHE4_HELP = """Usage:
    ccache [options]
    ccache compiler [compiler options]
    compiler [compiler options]          (via symbolic link)

Common options:
    -c, --cleanup              delete old files and recalculate size counters
    -C, --clear                clear the cache completely (except configuration)
        --evict-older-than AGE remove files older than AGE
    -s, --show-stats           show summary of configuration and statistics
                               counters in human-readable format (use
                               -v/--verbose once or twice for more details)
    -v, --verbose              increase verbosity
    -z, --zero-stats           zero statistics counters
"""

CCACHE3_HELP = """Usage:
    ccache [options]
    ccache compiler [compiler options]

Options:
    -c, --cleanup         delete old files and recalculate size counters
    -C, --clear           clear the cache completely (except configuration)
    -s, --show-stats      show summary of configuration and statistics counters
    -z, --zero-stats      zero statistics counters
"""

CCACHE4_VERBOSE_STATS = """Cache directory:    /home/runner/work/proj/proj/.ccache
Config file:        /home/runner/work/proj/proj/.ccache/ccache.conf
System config file: /etc/ccache.conf
Stats updated:      Wed May  1 12:00:00 2024
Cacheable calls:    312 / 320 (97.50%)
  Hits:             200 / 312 (64.10%)
    Direct:         180 / 200 (90.00%)
    Preprocessed:    20 / 200 (10.00%)
  Misses:           112 / 312 (35.90%)
Uncacheable calls:    8 / 320 ( 2.50%)
Local storage:
  Cache size (GB):  0.1 / 5.0 ( 2.31%)
  Files:            224
  Hits:             200 / 312 (64.10%)
  Misses:           112 / 312 (35.90%)
"""

CCACHE4_VERBOSE_STATS_EMPTY = """Cache directory:    /home/runner/work/proj/proj/.ccache
Config file:        /home/runner/work/proj/proj/.ccache/ccache.conf
System config file: /etc/ccache.conf
Stats updated:      never
Local storage:
  Cache size (GB):  0.0 / 5.0 ( 0.00%)
  Files:              0
"""

CCACHE4_STATS = """Cacheable calls:   312 / 320 (97.50%)
  Hits:            200 / 312 (64.10%)
    Direct:        180 / 200 (90.00%)
    Preprocessed:   20 / 200 (10.00%)
  Misses:          112 / 312 (35.90%)
Uncacheable calls:   8 / 320 ( 2.50%)
Local storage:
  Cache size (GB): 0.1 / 5.0 ( 2.31%)
"""

CCACHE3_STATS = """cache directory                     /home/runner/.ccache
primary config                      /home/runner/.ccache/ccache.conf
secondary config      (readonly)    /etc/ccache.conf
stats updated                       Wed May  1 12:00:00 2024
cache hit (direct)                   200
cache hit (preprocessed)              20
cache miss                           112
files in cache                       224
cache size                          98.3 MB
max cache size                       5.0 GB
"""

CCACHE3_STATS_EMPTY = """cache directory                     /home/runner/.ccache
primary config                      /home/runner/.ccache/ccache.conf
secondary config      (readonly)    /etc/ccache.conf
cache hit (direct)                     0
cache miss                             0
files in cache                         0
cache size                           0.0 kB
max cache size                       5.0 GB
"""

SCCACHE_STATS = """Compile requests                    524
Compile requests executed           120
Cache hits                          404
Cache misses                        120
Cache timeouts                        0
Cache read errors                     0
Cache location                  Local disk: "/home/runner/.sccache"
Cache size                           12 MiB
Max cache size                       10 GiB
"""

SCCACHE_STATS_EMPTY = """Compile requests                      0
Compile requests executed             0
Cache hits                            0
Cache misses                          0
Cache location                  Local disk: "/home/runner/.sccache"
Cache size                            0 bytes
Max cache size                       10 GiB
"""

SYSCTL_BOOTTIME = (
    "kern.boottime: { sec = 1714550400, usec = 123456 } Wed May  1 08:00:00 2024\n"
)
