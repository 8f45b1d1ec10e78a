"""
Logging support for running inside CI workflow steps.

Records are rendered as workflow commands so that the CI runner can annotate
warnings and notices and fold grouped output:

    ::debug::Not appending timestamp ...
    ::notice::ccache setup failed, skipping saving.
    ::warning::Saving cache failed: ...
    ::group::ccache stats
    ...
    ::endgroup::

Informational records are printed as plain lines.

Usage:
    import logging
    from ccachekit.core.workflow_log import configure_logging, log_group

    configure_logging(verbose=False, quiet=False)
    logger = logging.getLogger(__name__)

    with log_group(logger, "ccache stats"):
        logger.info("Cache size (GB): 1.2 / 5.0")
"""

import logging
import os
import sys
from contextlib import contextmanager
from typing import Mapping, Optional

NOTICE = 25
logging.addLevelName(NOTICE, "NOTICE")


def escape_data(message: str) -> str:
    """
    Escape a message for use as workflow command data.

    Percent signs and line breaks would otherwise end or corrupt the command.
    """
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class WorkflowCommandFormatter(logging.Formatter):
    """Format log records as workflow commands keyed on their level."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)

        if record.levelno >= logging.ERROR:
            return f"::error::{escape_data(message)}"
        elif record.levelno >= logging.WARNING:
            return f"::warning::{escape_data(message)}"
        elif record.levelno >= NOTICE:
            return f"::notice::{escape_data(message)}"
        elif record.levelno >= logging.INFO:
            return message
        return f"::debug::{escape_data(message)}"


def running_in_ci(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Check whether the process runs as a CI workflow step."""
    environ = os.environ if environ is None else environ
    return environ.get("GITHUB_ACTIONS") == "true"


def configure_logging(
    verbose: bool = False,
    quiet: bool = False,
    environ: Optional[Mapping[str, str]] = None,
) -> None:
    """
    Configure root logging based on verbose/quiet flags.

    Inside CI, debug records are always emitted; the runner hides them unless
    step debugging is enabled.

    Args:
        verbose: Emit debug records
        quiet: Emit errors only
        environ: Environment used to detect CI (defaults to os.environ)
    """
    if quiet:
        level = logging.ERROR
    elif verbose or running_in_ci(environ):
        level = logging.DEBUG
    else:
        level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(WorkflowCommandFormatter("%(message)s"))

    logging.basicConfig(
        level=level,
        handlers=[handler],
        force=True,  # Reconfigure if already configured
    )


@contextmanager
def log_group(logger: logging.Logger, title: str):
    """
    Fold every line logged or printed inside the block under ``title``.

    The group is closed even when the block raises.
    """
    logger.info(f"::group::{title}")
    try:
        yield
    finally:
        logger.info("::endgroup::")


__all__ = [
    "NOTICE",
    "WorkflowCommandFormatter",
    "configure_logging",
    "escape_data",
    "log_group",
    "running_in_ci",
]
