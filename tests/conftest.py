"""Shared fixtures: a synthetic project root with a known layout and known ages."""

import os
import time
from pathlib import Path

import pytest

from project_finder.services.project_directory import ProjectDirectoryService

HOUR = 3600
DAY = 86400


def set_age(path: Path, seconds_ago: float) -> None:
    """Set both atime and mtime of *path* to *seconds_ago* seconds in the past.

    Args:
        path: File or directory to touch.
        seconds_ago: How far back to date it.
    """
    moment = time.time() - seconds_ago
    os.utime(path, (moment, moment))


@pytest.fixture()
def project_root(tmp_path: Path) -> Path:
    """Create a temporary project root with a mix of projects and noise.

    - ``web-app``: ``package.json`` + ``README.md``, modified 1 hour ago
    - ``data-tools``: ``requirements.txt``, modified 2 days ago
    - ``rusty``: ``Cargo.toml`` and a ``src/`` directory, modified 10 days ago
    - ``.hidden``: a hidden directory (always excluded)
    - ``notes.txt``: a regular file at the root (not a project)

    Args:
        tmp_path: Pytest-provided temporary directory.

    Returns:
        Path to the temporary project root.
    """
    web = tmp_path / "web-app"
    web.mkdir()
    (web / "package.json").write_text("{}")
    (web / "README.md").write_text("# Web")

    data = tmp_path / "data-tools"
    data.mkdir()
    (data / "requirements.txt").write_text("requests\n")

    rusty = tmp_path / "rusty"
    rusty.mkdir()
    (rusty / "Cargo.toml").write_text("[package]\n")
    (rusty / "src").mkdir()

    (tmp_path / ".hidden").mkdir()
    (tmp_path / "notes.txt").write_text("not a project")

    # Ages are set last: writing children bumps the directory mtime.
    set_age(web, 1 * HOUR)
    set_age(data, 2 * DAY)
    set_age(rusty, 10 * DAY)
    return tmp_path


@pytest.fixture()
def service(project_root: Path) -> ProjectDirectoryService:
    """Create a ``ProjectDirectoryService`` over the synthetic project root.

    Args:
        project_root: Fixture-provided temporary project root.

    Returns:
        A fresh service instance.
    """
    return ProjectDirectoryService(project_root, git_timeout_seconds=5)


@pytest.fixture()
def missing_service(tmp_path: Path) -> ProjectDirectoryService:
    """Create a service whose project root does not exist.

    Args:
        tmp_path: Pytest-provided temporary directory.

    Returns:
        A service bound to a non-existent directory.
    """
    return ProjectDirectoryService(tmp_path / "nonexistent")
