"""
Shell command execution for ccachekit.

Cache tools are driven through their command line. Two modes are needed:

- capture: run a command through ``bash -xc`` and collect its output for
  pattern matching (stats, help text)
- stream: run a command with output going straight to the console so the
  operator sees it in the job log (eviction, full stats report)

Both modes raise CommandFailedError on a non-zero exit status. No timeout is
applied unless one is given explicitly.
"""

import logging
import shlex
import subprocess
import sys
from dataclasses import dataclass
from typing import Optional

from .exceptions import CommandFailedError

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Outcome of a finished command."""

    command: str
    returncode: int
    stdout: str = ""
    stderr: str = ""


class ShellRunner:
    """
    Run cache tool commands.

    Attributes:
        timeout: Seconds before a command is abandoned, or None to wait forever

    Example:
        >>> runner = ShellRunner()
        >>> result = runner.capture("ccache -s")
        >>> print(result.stdout)
    """

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def capture(self, command: str, shell: bool = True) -> CommandResult:
        """
        Run ``command`` and capture stdout/stderr.

        Args:
            command: Command line
            shell: Run through ``bash -xc``; otherwise split with shell quoting
                rules and execute directly

        Returns:
            CommandResult with captured output

        Raises:
            CommandFailedError: If the command exits with a non-zero status
        """
        logger.debug(f"Running: {command}")
        argv = ["bash", "-xc", command] if shell else shlex.split(command)
        completed = subprocess.run(
            argv,
            capture_output=True,
            text=True,
            timeout=self.timeout,
        )
        result = CommandResult(
            command=command,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
        if result.returncode != 0:
            raise CommandFailedError(command, result.returncode, result.stderr)
        return result

    def stream(self, command: str) -> CommandResult:
        """
        Run ``command`` with output attached to the console.

        Args:
            command: Command line, split with shell quoting rules

        Returns:
            CommandResult without captured output

        Raises:
            CommandFailedError: If the command exits with a non-zero status
        """
        logger.info(f"[command]{command}")
        # Keep our own buffered lines ahead of the child's output
        sys.stdout.flush()
        completed = subprocess.run(shlex.split(command), timeout=self.timeout)
        if completed.returncode != 0:
            raise CommandFailedError(command, completed.returncode)
        return CommandResult(command=command, returncode=completed.returncode)


__all__ = ["CommandResult", "ShellRunner"]
