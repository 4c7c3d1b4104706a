"""Shared pytest fixtures for pathvalue tests."""

import locale
from collections.abc import Callable, Iterator

import pytest
from loguru import logger

from pathvalue.host.local import LocalPlatform, StaticWorkspace
from pathvalue.models.path import PathValue


@pytest.fixture
def posix() -> LocalPlatform:
    """Posix platform rooted at a fixed project directory."""
    return LocalPlatform(
        base_directory="/home/user/project",
        flavor="posix",
        home_directory="/home/user",
    )


@pytest.fixture
def nt() -> LocalPlatform:
    """Windows platform rooted at a fixed project directory."""
    return LocalPlatform(
        base_directory="C:\\Users\\me\\project",
        flavor="nt",
        home_directory="C:\\Users\\me",
    )


@pytest.fixture
def make_path(posix: LocalPlatform) -> Callable[[str], PathValue]:
    """Build posix PathValues."""

    def _make(full: str = "") -> PathValue:
        return PathValue(full, posix)

    return _make


@pytest.fixture
def workspace() -> StaticWorkspace:
    """Workspace with two projects and an active document in the first."""
    return StaticWorkspace(
        ["/home/user/project", "/srv/other"],
        active_document="/home/user/project/src/main.py",
    )


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Drop loguru sinks configured during a test."""
    yield
    logger.remove()


@pytest.fixture(autouse=True)
def restore_collation() -> Iterator[None]:
    """Undo collation changes made by the CLI group."""
    saved = locale.setlocale(locale.LC_COLLATE)
    yield
    locale.setlocale(locale.LC_COLLATE, saved)
