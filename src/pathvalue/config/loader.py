"""Configuration loading utilities.

Settings come from an optional YAML file layered over ``PATHVALUE_``
environment variables: keys present in the file win, and the
environment fills in whatever the file leaves out.
"""

from pathlib import Path
from typing import Any

import yaml

from pathvalue.config.models import Config


def _read_mapping(config_path: Path) -> dict[str, Any]:
    try:
        with config_path.open() as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}") from e

    # An empty file is an empty mapping
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML root must be a mapping, not {type(data).__name__}")
    return data


def load_config(config_path: Path | None) -> Config:
    """
    Build the configuration for a CLI invocation.

    Without a file only the environment and defaults apply. Nested
    sections merge key by key, so ``PATHVALUE_PLATFORM__FLAVOR`` still
    applies when the file sets only ``platform.home_directory``.

    Args:
        config_path: Path to YAML config file, or None.

    Returns:
        Validated Config object.

    Raises:
        FileNotFoundError: If config_path doesn't exist.
        ValueError: If YAML is invalid or its root is not a mapping.
    """
    if config_path is None:
        return Config()

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    return Config(**_read_mapping(config_path))
