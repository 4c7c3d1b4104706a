"""Local host adapters.

Implements the platform, workspace and preference ports on top of
``posixpath``/``ntpath`` and the loaded configuration, so PathValue can
be used outside of an editor.
"""

import ntpath
import os
import posixpath
from collections.abc import Sequence
from types import ModuleType
from typing import ClassVar, NamedTuple

from loguru import logger

from pathvalue.config.models import Config, InputConfig


class LocalPlatform:
    """Path primitives for a posix or Windows style filesystem.

    The flavor defaults to the running interpreter's ``os.path``; pass
    ``"posix"`` or ``"nt"`` to emulate the other one.
    """

    FLAVORS: ClassVar[dict[str, ModuleType]] = {"posix": posixpath, "nt": ntpath}

    def __init__(
        self,
        base_directory: str | None = None,
        flavor: str = "native",
        home_directory: str | None = None,
    ) -> None:
        """
        Initialize the platform.

        Args:
            base_directory: Directory relative paths resolve against.
                Falls back to the home directory when unset.
            flavor: One of "native", "posix" or "nt".
            home_directory: Replacement for a leading "~". Defaults to
                the current user's home directory.
        """
        if flavor == "native":
            self._flavor: ModuleType = os.path
        elif flavor in self.FLAVORS:
            self._flavor = self.FLAVORS[flavor]
        else:
            raise ValueError(f"Unknown path flavor: {flavor}")

        self._separators = self._flavor.sep + (self._flavor.altsep or "")
        self.home_directory = home_directory or os.path.expanduser("~")
        self.base_directory = base_directory

    def native_separator(self) -> str:
        return self._flavor.sep

    def directory_name(self, path: str) -> str:
        """Return the parent directory, ignoring trailing separators.

        ``"/a/b/"`` yields ``"/a"``; a root (``"/"``, ``"C:\\"``) yields
        itself. A path without any directory part yields ``"."``.
        """
        trimmed = path.rstrip(self._separators)
        drive = self._flavor.splitdrive(path)[0]
        if len(trimmed) <= len(drive):
            # Bare root or drive root
            result = self._flavor.dirname(path)
        else:
            result = self._flavor.dirname(trimmed)
        return result or "."

    def absolutify(self, path: str) -> str:
        """Expand a "~" home prefix and resolve relative paths.

        Only a bare "~" or "~" followed by a separator is the home
        directory; names such as "~backup" are ordinary relative paths.
        Absolute paths are returned unchanged. Resolved relative paths
        are normalized but keep a trailing separator if one was given.
        """
        if path == "~" or (path[:1] == "~" and path[1] in self._separators):
            path = self.home_directory + path[1:]

        if self._flavor.isabs(path):
            return path

        base = self.base_directory or self.home_directory
        resolved = self._flavor.normpath(self._flavor.join(base, path))
        if path and path[-1] in self._separators and not resolved.endswith(self._flavor.sep):
            resolved += self._flavor.sep
        return resolved


class StaticWorkspace:
    """Workspace with a fixed set of project roots and active document."""

    def __init__(
        self,
        project_paths: Sequence[str] = (),
        active_document: str | None = None,
    ) -> None:
        self._project_paths = list(project_paths)
        self._active_document = active_document

    def project_root_paths(self) -> list[str]:
        return list(self._project_paths)

    def project_root_path(self) -> str | None:
        """Return the project containing the active document, else the first one."""
        if self._active_document:
            for root in self._project_paths:
                if _contains(root, self._active_document):
                    return root
        return self._project_paths[0] if self._project_paths else None

    def active_document_path(self) -> str | None:
        return self._active_document


class ConfigPreferences:
    """Preferences backed by InputConfig."""

    def __init__(self, config: InputConfig) -> None:
        self.config = config

    def default_input_preference(self) -> str:
        return str(self.config.default_input_value)


class Host(NamedTuple):
    """The three host adapters PathValue consumes."""

    platform: LocalPlatform
    workspace: StaticWorkspace
    preferences: ConfigPreferences


def _contains(root: str, path: str) -> bool:
    """Whether path lies inside the directory root."""
    if not root or not path.startswith(root) or len(path) == len(root):
        return False
    return root[-1] in "/\\" or path[len(root)] in "/\\"


def build_host(config: Config) -> Host:
    """
    Build local host adapters from configuration.

    Relative paths resolve against the workspace's preferred project
    root, or the home directory when there is none.

    Args:
        config: Loaded configuration.

    Returns:
        Host with platform, workspace and preferences adapters.
    """
    workspace = StaticWorkspace(
        config.workspace.project_paths,
        config.workspace.active_document,
    )
    platform = LocalPlatform(
        base_directory=workspace.project_root_path(),
        flavor=config.platform.flavor,
        home_directory=config.platform.home_directory,
    )
    logger.debug(
        "Local host built: flavor={} base={} projects={}",
        config.platform.flavor,
        platform.base_directory,
        len(workspace.project_root_paths()),
    )
    return Host(platform, workspace, ConfigPreferences(config.input))
