"""
Shared utilities for CLI commands.

Provides configuration loading and option resolution used across commands.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from ccachekit.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

STORE_DIR_ENV = "CCACHEKIT_STORE_DIR"
DEFAULT_STORE_DIRNAME = ".ccachekit-store"


# ============================================================================
# Configuration Management
# ============================================================================


def load_yaml_config(config_file: Path, required: bool = False) -> Dict[str, Any]:
    """
    Load and parse a YAML configuration file.

    Args:
        config_file: Path to YAML configuration file
        required: If True, raise error if file doesn't exist

    Returns:
        Configuration dictionary (empty dict if file doesn't exist and not required)

    Raises:
        ConfigurationError: If the file is required but missing, cannot be
            parsed, or does not contain a mapping

    Example:
        >>> config = load_yaml_config(Path("ccachekit.yaml"))
        >>> config.get("state", {})
    """
    if not config_file.exists():
        if required:
            raise ConfigurationError(f"Configuration file not found: {config_file}")
        logger.debug(f"Config file not found (optional): {config_file}")
        return {}

    logger.debug(f"Loading configuration from {config_file}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.debug(f"Failed to parse YAML: {e}")
        raise ConfigurationError(f"Invalid YAML in {config_file}: {e}") from e

    config = config or {}
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Configuration in {config_file} must be a mapping, "
            f"got {type(config).__name__}"
        )
    return config


def validate_section(config: Mapping[str, Any], name: str) -> Dict[str, Any]:
    """
    Get an optional mapping section from a configuration dictionary.

    Args:
        config: Configuration dictionary
        name: Section name

    Returns:
        The section (empty dict if absent)

    Raises:
        ConfigurationError: If the section is present but not a mapping
    """
    section = config.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"'{name}' section must be a mapping, got {type(section).__name__}"
        )
    return section


# ============================================================================
# Option Resolution
# ============================================================================


def resolve_store_dir(
    store_dir: Optional[Path],
    project_root: Path,
    environ: Optional[Mapping[str, str]] = None,
) -> Path:
    """
    Determine the cache store directory.

    Priority: explicit option, then CCACHEKIT_STORE_DIR, then
    ``<project_root>/.ccachekit-store``.
    """
    environ = os.environ if environ is None else environ

    if store_dir:
        return Path(store_dir)
    if environ.get(STORE_DIR_ENV):
        return Path(environ[STORE_DIR_ENV])
    return Path(project_root) / DEFAULT_STORE_DIRNAME


__all__ = [
    "load_yaml_config",
    "resolve_store_dir",
    "validate_section",
]
