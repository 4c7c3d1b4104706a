"""Port interfaces for pathvalue.

Ports define the host capabilities PathValue consumes. Path logic
depends only on these abstractions, never on a concrete host.
"""

from pathvalue.ports.host import PlatformPort, PreferencesPort, WorkspacePort

__all__ = [
    "PlatformPort",
    "PreferencesPort",
    "WorkspacePort",
]
