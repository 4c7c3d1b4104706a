"""PathValue: an immutable decomposition of a path string.

A path is split into a directory prefix and a trailing fragment (the
last segment). Paths that end in a separator have an empty fragment.
All derived operations (parent, root, shortcut matching, ordering and
common prefixes) work on these fields only, and reach host state
exclusively through the ports in ``pathvalue.ports``.
"""

import locale
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from functools import cmp_to_key

from loguru import logger

from pathvalue.config.models import DefaultInputValue
from pathvalue.errors import InvalidArgumentError
from pathvalue.host.local import LocalPlatform
from pathvalue.ports import PlatformPort, PreferencesPort, WorkspacePort

SEPARATORS = ("/", "\\")


def infer_separator(path: str, native: str) -> str:
    """
    Pick the separator a path string uses.

    Mixed-separator paths are ambiguous, so when both "/" and "\\"
    appear (or neither does) the native separator wins.

    Args:
        path: Raw path string.
        native: The platform's native separator.

    Returns:
        The separator character to split on.
    """
    found = [sep for sep in SEPARATORS if sep in path]
    if len(found) == 1:
        return found[0]
    return native


@dataclass(frozen=True, eq=False)
class PathValue:
    """Immutable wrapper for dealing with filesystem path strings."""

    full: str = ""
    platform: PlatformPort = field(default_factory=LocalPlatform, repr=False)
    separator: str = field(init=False)
    fragment: str = field(init=False)
    directory: str = field(init=False)
    absolute: str = field(init=False)

    def __post_init__(self) -> None:
        sep = infer_separator(self.full, self.platform.native_separator())
        fragment = self.full.split(sep)[-1]

        object.__setattr__(self, "separator", sep)
        object.__setattr__(self, "fragment", fragment)
        object.__setattr__(self, "directory", self.full[: len(self.full) - len(fragment)])
        object.__setattr__(self, "absolute", self.platform.absolutify(self.full))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathValue):
            return NotImplemented
        return self.full == other.full

    def __hash__(self) -> int:
        return hash(self.full)

    def __str__(self) -> str:
        return self.full

    def _derive(self, full: str) -> "PathValue":
        return PathValue(full, platform=self.platform)

    def equals(self, other: "PathValue") -> bool:
        return self.full == other.full

    def is_project_directory(self, workspace: WorkspacePort) -> bool:
        """Whether the absolute path is one of the open project roots."""
        return self.absolute in workspace.project_root_paths()

    def is_root(self) -> bool:
        return self.platform.directory_name(self.absolute) == self.absolute

    def has_case_sensitive_fragment(self) -> bool:
        """Whether the fragment uses upper case letters."""
        return self.fragment != "" and self.fragment != self.fragment.lower()

    def as_directory(self) -> "PathValue":
        if self.fragment:
            return self._derive(self.full + self.separator)
        return self._derive(self.full)

    def parent(self) -> "PathValue":
        """
        Return the parent directory, always in directory form.

        ``"/a/b"`` and ``"/a/b/"`` both yield ``"/a/"``. A root is its
        own parent.
        """
        if self.is_root():
            return self
        if self.fragment:
            return self._derive(self.directory)

        parent = self.platform.directory_name(self.directory)
        if not parent.endswith(self.separator):
            parent += self.separator
        return self._derive(parent)

    def root(self) -> "PathValue":
        """Return the root directory for the drive this path is on."""
        last = None
        current = self.absolute
        while current != last:
            last = current
            current = self.platform.directory_name(current)
        return self._derive(current)

    def has_shortcut(self, shortcut: str) -> bool:
        """
        Check if the last directory in this path equals the shortcut.

        The path must end in a separator: ``":/"`` and ``"/foo/bar/:/"``
        have the ``":"`` shortcut, ``"/foo/bar:/"`` and ``"/blah/:"`` do
        not.
        """
        suffix = shortcut + self.separator
        return not self.fragment and (
            self.directory.endswith(self.separator + suffix) or self.directory == suffix
        )

    @staticmethod
    def compare(path1: "PathValue", path2: "PathValue") -> int:
        """
        Compare two paths using the current locale's collation.

        Strings the locale collates as equal fall back to code point
        order, so only equal paths compare as 0.

        Returns:
            Negative, zero or positive, like ``cmp``.
        """
        result = locale.strcoll(path1.full, path2.full)
        if result == 0 and path1.full != path2.full:
            return -1 if path1.full < path2.full else 1
        return (result > 0) - (result < 0)

    @classmethod
    def initial(
        cls,
        workspace: WorkspacePort,
        preferences: PreferencesPort,
        platform: PlatformPort | None = None,
    ) -> "PathValue":
        """
        Return the path to show initially in the path input.

        The active file's directory is tried first when preferred, then
        the project root. Without a usable path the result is empty.

        Args:
            workspace: Source of the active document and project root.
            preferences: Source of the default input preference.
            platform: Platform for the returned path.

        Returns:
            A directory-form PathValue, or the empty PathValue.
        """
        platform = platform or LocalPlatform()
        sep = platform.native_separator()
        preference = preferences.default_input_preference()

        if preference == DefaultInputValue.ACTIVE_FILE_DIR:
            document = workspace.active_document_path()
            if document:
                logger.debug("Initial path from active document: {}", document)
                return cls(_with_trailing(platform.directory_name(document), sep), platform)

        if preference in (DefaultInputValue.ACTIVE_FILE_DIR, DefaultInputValue.PROJECT_ROOT):
            project = workspace.project_root_path()
            if project:
                logger.debug("Initial path from project root: {}", project)
                return cls(_with_trailing(project, sep), platform)

        logger.debug("No initial path for preference {}", preference)
        return cls("", platform)

    @classmethod
    def common_prefix(
        cls, paths: Sequence["PathValue"], case_sensitive: bool = False
    ) -> "PathValue":
        """
        Return a new path with the common prefix of all the given paths.

        Only the lexicographically first and last strings are compared:
        every other string sorts between them, so it shares at least
        their common prefix.

        Args:
            paths: Two or more paths.
            case_sensitive: When False, characters differing only in
                case match and contribute their lower case form.

        Returns:
            PathValue of the common prefix.

        Raises:
            InvalidArgumentError: If fewer than two paths are given.
        """
        if len(paths) < 2:
            raise InvalidArgumentError(
                "Cannot find common prefix for lists shorter than two elements."
            )

        fulls = sorted(path.full for path in paths)
        first, last = fulls[0], fulls[-1]

        prefix = []
        for a, b in zip(first, last):
            if a == b:
                prefix.append(a)
            elif not case_sensitive and a.lower() == b.lower():
                prefix.append(a.lower())
            else:
                break

        return cls("".join(prefix), paths[0].platform)


def sort_paths(paths: Iterable[PathValue]) -> list[PathValue]:
    """Sort paths with PathValue.compare."""
    return sorted(paths, key=cmp_to_key(PathValue.compare))


def _with_trailing(path: str, sep: str) -> str:
    return path if path.endswith(sep) else path + sep
