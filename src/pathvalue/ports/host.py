"""Port interfaces for host-supplied path context."""

from collections.abc import Sequence
from typing import Protocol


class PlatformPort(Protocol):
    """Protocol for platform path primitives.

    Implementations must behave as pure functions of their inputs;
    PathValue relies on that for its own invariants.
    """

    def native_separator(self) -> str:
        """Return the platform's default path separator.

        Returns:
            A single separator character.
        """
        ...

    def directory_name(self, path: str) -> str:
        """Return the parent directory of an absolute path.

        Trailing separators are ignored, and a filesystem root is its
        own directory name.

        Args:
            path: Absolute path string

        Returns:
            Parent directory path string
        """
        ...

    def absolutify(self, path: str) -> str:
        """Resolve a possibly relative path against the base directory.

        Args:
            path: Path string, relative or absolute

        Returns:
            Absolute path string
        """
        ...


class WorkspacePort(Protocol):
    """Protocol for the host's open projects and active document."""

    def project_root_paths(self) -> Sequence[str]:
        """Return the absolute paths of all open project roots."""
        ...

    def project_root_path(self) -> str | None:
        """Return the preferred project root, if any."""
        ...

    def active_document_path(self) -> str | None:
        """Return the path of the active document, if it has one."""
        ...


class PreferencesPort(Protocol):
    """Protocol for user preferences consulted by PathValue."""

    def default_input_preference(self) -> str:
        """Return the configured default input value."""
        ...
