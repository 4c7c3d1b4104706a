"""Tests for PathValue construction, predicates and equality."""

from collections.abc import Callable
from dataclasses import FrozenInstanceError

import pytest

from pathvalue.host.local import LocalPlatform, StaticWorkspace
from pathvalue.models.path import PathValue, infer_separator

MakePath = Callable[[str], PathValue]


class TestInferSeparator:
    """Tests for infer_separator."""

    def test_forward_slash_only(self) -> None:
        """A path with only forward slashes uses them."""
        assert infer_separator("/a/b", "\\") == "/"

    def test_backslash_only(self) -> None:
        """A path with only backslashes uses them."""
        assert infer_separator("C:\\a\\b", "/") == "\\"

    def test_neither_falls_back_to_native(self) -> None:
        """Without any separator the native one is used."""
        assert infer_separator("file.txt", "\\") == "\\"
        assert infer_separator("", "/") == "/"

    def test_mixed_falls_back_to_native(self) -> None:
        """Mixed separators are ambiguous, so the native one wins."""
        assert infer_separator("a/b\\c", "/") == "/"
        assert infer_separator("a/b\\c", "\\") == "\\"


class TestConstruction:
    """Tests for PathValue field decomposition."""

    def test_file_path(self, make_path: MakePath) -> None:
        """Split an absolute file path."""
        path = make_path("/a/b/c.txt")

        assert path.full == "/a/b/c.txt"
        assert path.separator == "/"
        assert path.fragment == "c.txt"
        assert path.directory == "/a/b/"
        assert path.absolute == "/a/b/c.txt"

    def test_directory_path_has_empty_fragment(self, make_path: MakePath) -> None:
        """Paths ending in a separator have a blank fragment."""
        path = make_path("/a/b/")

        assert path.fragment == ""
        assert path.directory == "/a/b/"

    def test_empty_string(self, make_path: MakePath) -> None:
        """The empty path is valid and resolves to the base directory."""
        path = make_path("")

        assert path.fragment == ""
        assert path.directory == ""
        assert path.absolute == "/home/user/project"

    def test_default_construction(self) -> None:
        """PathValue() builds the empty path on the native platform."""
        path = PathValue()

        assert path.full == ""
        assert path.fragment == ""
        assert path.directory == ""

    def test_relative_fragment_only(self, make_path: MakePath) -> None:
        """A bare name is all fragment and resolves against the base."""
        path = make_path("foo")

        assert path.fragment == "foo"
        assert path.directory == ""
        assert path.absolute == "/home/user/project/foo"

    def test_relative_directory_keeps_trailing_separator(self, make_path: MakePath) -> None:
        """Resolving a relative directory keeps it in directory form."""
        assert make_path("src/").absolute == "/home/user/project/src/"
        assert make_path("../x/").absolute == "/home/user/x/"

    def test_tilde_expands_to_home(self, make_path: MakePath) -> None:
        """A leading tilde resolves against the home directory."""
        assert make_path("~/docs").absolute == "/home/user/docs"

    def test_backslash_path_on_posix(self, make_path: MakePath) -> None:
        """Backslash-only paths split on backslashes even on posix."""
        path = make_path("C:\\Users\\me\\file.txt")

        assert path.separator == "\\"
        assert path.fragment == "file.txt"
        assert path.directory == "C:\\Users\\me\\"

    def test_mixed_path_uses_native_separator(
        self, posix: LocalPlatform, nt: LocalPlatform
    ) -> None:
        """Mixed-separator paths split on the platform separator."""
        on_posix = PathValue("a/b\\c", posix)
        on_nt = PathValue("a/b\\c", nt)

        assert on_posix.fragment == "b\\c"
        assert on_posix.directory == "a/"
        assert on_nt.fragment == "c"
        assert on_nt.directory == "a/b\\"

    @pytest.mark.parametrize(
        "full",
        [
            "",
            "/",
            "//",
            "/a",
            "/a/",
            "a/b/c",
            "a\\b\\",
            "C:\\",
            "mixed/and\\back",
            "~",
            "/trailing//",
            "no separators at all",
        ],
    )
    def test_decomposition_invariants(self, make_path: MakePath, full: str) -> None:
        """directory + fragment == full and the fragment has no separator."""
        path = make_path(full)

        assert path.directory + path.fragment == full
        assert path.separator not in path.fragment
        assert path.separator in ("/", "\\")

    def test_immutable(self, make_path: MakePath) -> None:
        """Fields cannot be reassigned."""
        path = make_path("/a/b")

        with pytest.raises(FrozenInstanceError):
            path.full = "/c"  # type: ignore[misc]

    def test_str_is_full(self, make_path: MakePath) -> None:
        """str() returns the original string."""
        assert str(make_path("/a/b")) == "/a/b"


class TestPredicates:
    """Tests for is_root, is_project_directory and case sensitivity."""

    def test_posix_root(self, make_path: MakePath) -> None:
        """The bare slash is a root, directories below it are not."""
        assert make_path("/").is_root() is True
        assert make_path("/a/").is_root() is False
        assert make_path("/a").is_root() is False

    def test_empty_path_is_not_root(self, make_path: MakePath) -> None:
        """The empty path resolves to the project, not a root."""
        assert make_path("").is_root() is False

    def test_windows_drive_root(self, nt: LocalPlatform) -> None:
        """Drive roots are roots on Windows."""
        assert PathValue("C:\\", nt).is_root() is True
        assert PathValue("C:\\Users\\", nt).is_root() is False

    def test_is_project_directory(self, make_path: MakePath, workspace: StaticWorkspace) -> None:
        """Only exact project root strings match."""
        assert make_path("/srv/other").is_project_directory(workspace) is True
        assert make_path("/srv/other/").is_project_directory(workspace) is False
        assert make_path("/srv").is_project_directory(workspace) is False

    def test_empty_path_is_base_project(
        self, make_path: MakePath, workspace: StaticWorkspace
    ) -> None:
        """The empty path resolves to the base directory, a project root."""
        assert make_path("").is_project_directory(workspace) is True

    def test_case_sensitive_fragment(self, make_path: MakePath) -> None:
        """Fragments using upper case are case sensitive."""
        assert make_path("/a/Foo").has_case_sensitive_fragment() is True
        assert make_path("/a/foo").has_case_sensitive_fragment() is False
        assert make_path("/a/123").has_case_sensitive_fragment() is False

    def test_directory_is_never_case_sensitive(self, make_path: MakePath) -> None:
        """Empty fragments are not case sensitive whatever the directory."""
        assert make_path("/A/B/").has_case_sensitive_fragment() is False


class TestEquality:
    """Tests for equals, == and hashing."""

    def test_equal_full_strings(self, make_path: MakePath) -> None:
        """Same string, equal paths."""
        assert make_path("/a/b").equals(make_path("/a/b"))
        assert make_path("/a/b") == make_path("/a/b")

    def test_no_normalization(self, make_path: MakePath) -> None:
        """Paths naming the same directory differently are not equal."""
        assert make_path("/a/b") != make_path("/a/b/")
        assert not make_path("/a/./b").equals(make_path("/a/b"))

    def test_platform_not_compared(self, posix: LocalPlatform, nt: LocalPlatform) -> None:
        """Equality looks at the string only."""
        assert PathValue("/a", posix) == PathValue("/a", nt)

    def test_hash_matches_equality(self, make_path: MakePath) -> None:
        """Equal paths collapse in a set."""
        paths = {make_path("/a"), make_path("/a"), make_path("/b")}

        assert len(paths) == 2

    def test_not_equal_to_string(self, make_path: MakePath) -> None:
        """A PathValue never equals a plain string."""
        assert make_path("/a") != "/a"
