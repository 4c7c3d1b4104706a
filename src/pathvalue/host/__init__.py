"""Local implementations of the host ports."""

from pathvalue.host.local import (
    ConfigPreferences,
    Host,
    LocalPlatform,
    StaticWorkspace,
    build_host,
)

__all__ = [
    "ConfigPreferences",
    "Host",
    "LocalPlatform",
    "StaticWorkspace",
    "build_host",
]
