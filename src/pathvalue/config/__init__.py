"""Configuration management for pathvalue."""

from pathvalue.config.loader import load_config
from pathvalue.config.models import (
    Config,
    DefaultInputValue,
    InputConfig,
    LoggingConfig,
    PlatformConfig,
    WorkspaceConfig,
)

__all__ = [
    "Config",
    "DefaultInputValue",
    "InputConfig",
    "LoggingConfig",
    "PlatformConfig",
    "WorkspaceConfig",
    "load_config",
]
