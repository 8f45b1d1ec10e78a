"""
Command-line wrapper around an installed ccache or sccache binary.

Usage:
    from ccachekit.caching.tool import CacheTool

    tool = CacheTool("ccache")
    verbose_capable = tool.supports_verbose_flag()
    tool.print_cache_size()
    if not tool.is_empty(verbose_capable):
        print("cache has entries")
"""

import logging
from typing import Optional

from ..core.shell import CommandResult, ShellRunner
from .stats import (
    cache_size_lines,
    ccache_stats_empty,
    ccache_verbose_stats_empty,
    sccache_stats_empty,
)

logger = logging.getLogger(__name__)

SUPPORTED_VARIANTS = ("ccache", "sccache")


class CacheTool:
    """
    Query and maintain a compiler cache through its CLI.

    Attributes:
        variant: Binary name, 'ccache' or 'sccache'
        runner: ShellRunner executing the commands
    """

    def __init__(self, variant: str, runner: Optional[ShellRunner] = None):
        if not variant:
            raise ValueError("variant cannot be empty")

        self.variant = variant
        self.runner = runner or ShellRunner()

    @property
    def is_ccache(self) -> bool:
        return self.variant == "ccache"

    def supports_verbose_flag(self) -> bool:
        """
        Check whether the binary understands ``--verbose``.

        Some ccache releases reject ``-s -v``, so the help text is inspected
        before any verbose stats invocation.
        """
        help_text = self.runner.capture(f"{self.variant} --help").stdout
        supported = "--verbose" in help_text
        logger.debug(f"{self.variant} supports --verbose: {supported}")
        return supported

    def stats(self, verbose: bool = False) -> str:
        """Capture the statistics report."""
        command = f"{self.variant} -s -v" if verbose else f"{self.variant} -s"
        return self.runner.capture(command).stdout

    def print_cache_size(self) -> None:
        """Log the cache size lines of the statistics report."""
        for line in cache_size_lines(self.stats()):
            logger.info(line)

    def show_stats(self, verbosity: str = "") -> CommandResult:
        """
        Print the full statistics report to the job log.

        Args:
            verbosity: Flag suffix from resolve_verbosity ("", " -v", " -vv")
        """
        return self.runner.stream(f"{self.variant} -s{verbosity}")

    def is_empty(self, verbose_capable: bool) -> bool:
        """
        Check whether the cache holds no entries.

        Output that matches no known pattern counts as non-empty.

        Args:
            verbose_capable: Result of supports_verbose_flag()
        """
        if self.is_ccache:
            if verbose_capable:
                return ccache_verbose_stats_empty(self.stats(verbose=True))
            return ccache_stats_empty(self.stats())
        return sccache_stats_empty(self.stats())

    def evict_older_than(self, seconds: int) -> CommandResult:
        """Evict entries not accessed within the last ``seconds`` seconds."""
        return self.runner.stream(f"{self.variant} --evict-older-than {seconds}s")

    def __repr__(self) -> str:
        return f"CacheTool(variant={self.variant!r})"


__all__ = ["CacheTool", "SUPPORTED_VARIANTS"]
