"""
Job state for the cache save hook.

The setup phase of the cache action records which tool it configured and
under which key the cache was restored. The post-job hook reads those values
back, together with the user's ``verbose`` input, into a JobState object that
is passed explicitly to the save flow.

State and inputs reach the hook through the environment, following the CI
runner's convention:

    STATE_ccacheVariant=ccache
    STATE_primaryKey=ccache-linux-
    STATE_cleanUnused=false
    STATE_shouldSave=true
    STATE_appendTimestamp=true
    INPUT_VERBOSE=1

Example:
    >>> from ccachekit.core.state import JobState
    >>> state = JobState.from_env()
    >>> if not state.is_complete:
    ...     print("setup did not run")
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)

STATE_PREFIX = "STATE_"
INPUT_PREFIX = "INPUT_"

# State names written by the setup phase
VARIANT_STATE = "ccacheVariant"
PRIMARY_KEY_STATE = "primaryKey"
CLEAN_UNUSED_STATE = "cleanUnused"
SHOULD_SAVE_STATE = "shouldSave"
APPEND_TIMESTAMP_STATE = "appendTimestamp"

VERBOSE_INPUT = "verbose"
DEFAULT_VERBOSE = "0"


def _flag(value: Any) -> bool:
    """Interpret a stored flag; only the literal string "true" is set."""
    if isinstance(value, bool):
        return value
    return value == "true"


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


@dataclass
class JobState:
    """
    Values recorded by the setup phase plus user inputs.

    Attributes:
        variant: Cache tool in use ('ccache' or 'sccache'), empty if unset
        primary_key: Key the cache was restored under, empty if unset
        clean_unused: Evict entries not used during this job
        should_save: Persist the cache at the end of the job
        append_timestamp: Suffix the save key with the current time
        verbose: Verbosity setting for the stats report ("0", "1" or "2")
    """

    variant: str = ""
    primary_key: str = ""
    clean_unused: bool = False
    should_save: bool = False
    append_timestamp: bool = False
    verbose: str = DEFAULT_VERBOSE

    @property
    def is_complete(self) -> bool:
        """True when the setup phase recorded both tool and key."""
        return bool(self.variant) and bool(self.primary_key)

    @property
    def cache_paths(self) -> list[str]:
        """Directories persisted for this tool, relative to the workspace."""
        return [f".{self.variant}"]

    @classmethod
    def from_mapping(
        cls, state: Mapping[str, Any], inputs: Optional[Mapping[str, Any]] = None
    ) -> "JobState":
        """
        Build state from plain mappings of state names and input names.

        Missing entries read as empty or false.
        """
        inputs = inputs or {}
        verbose = _text(inputs.get(VERBOSE_INPUT, DEFAULT_VERBOSE)).strip()

        return cls(
            variant=_text(state.get(VARIANT_STATE)),
            primary_key=_text(state.get(PRIMARY_KEY_STATE)),
            clean_unused=_flag(state.get(CLEAN_UNUSED_STATE)),
            should_save=_flag(state.get(SHOULD_SAVE_STATE)),
            append_timestamp=_flag(state.get(APPEND_TIMESTAMP_STATE)),
            verbose=verbose,
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "JobState":
        """
        Read state and inputs from environment variables.

        Args:
            environ: Environment mapping (defaults to os.environ)
        """
        environ = os.environ if environ is None else environ

        state = {
            key[len(STATE_PREFIX) :]: value
            for key, value in environ.items()
            if key.startswith(STATE_PREFIX)
        }
        # Inputs are upper-cased by the runner; an absent input means default
        verbose_key = INPUT_PREFIX + VERBOSE_INPUT.upper()
        inputs = {}
        if environ.get(verbose_key):
            inputs[VERBOSE_INPUT] = environ[verbose_key]

        job_state = cls.from_mapping(state, inputs)
        logger.debug(f"Loaded job state from environment: {job_state}")
        return job_state

    @classmethod
    def from_config_file(cls, config_file: Path) -> "JobState":
        """
        Read state from a YAML file with ``state`` and ``inputs`` sections.

        Example file:
            state:
              ccacheVariant: ccache
              primaryKey: ccache-local
              shouldSave: true
            inputs:
              verbose: "1"

        Raises:
            ConfigurationError: If the file is missing or malformed
        """
        from ccachekit.cli.utils import load_yaml_config, validate_section

        config = load_yaml_config(Path(config_file), required=True)
        state = validate_section(config, "state")
        inputs = validate_section(config, "inputs")

        job_state = cls.from_mapping(state, inputs)
        logger.debug(f"Loaded job state from {config_file}: {job_state}")
        return job_state


__all__ = ["JobState"]
