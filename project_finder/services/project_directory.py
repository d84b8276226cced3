"""Project directory service -- list, find, inspect and rank projects under one root.

Every immediate, non-hidden sub-directory of the configured project root is a
project.  The service answers four read-only queries about them.  Nothing is
cached: each call lists the root afresh and stats what it needs.

Domain failures never escape as exceptions.  Each query returns a
``QueryResult`` whose ``text`` is either the rendered payload or a message the
caller can show as-is.
"""

import asyncio
import json
import logging
import math
import os
from collections.abc import Iterable
from datetime import UTC, datetime
from pathlib import Path

from pydantic import BaseModel

from project_finder.models import (
    MatchCandidate,
    ProjectDetail,
    ProjectEntry,
    ProjectListing,
    ProjectType,
    QueryResult,
    RecentProject,
    ResultStatus,
)
from project_finder.services.git_status import query_git_status

logger = logging.getLogger(__name__)

HIDDEN_PREFIX = "."
MAX_FUZZY_RESULTS = 5
DEFAULT_RECENT_COUNT = 10

# Checked in this order; ``projectFiles`` keeps it.
MARKER_FILES = ["README.md", "package.json", ".git", "requirements.txt", "Cargo.toml"]
GIT_MARKER = ".git"

# First matching marker wins.  ``go.mod`` is not among the checked markers, so
# a Go checkout with ``.git`` reports as a git repository.
PROJECT_TYPE_MARKERS: list[tuple[str, ProjectType]] = [
    ("package.json", ProjectType.NODE),
    ("requirements.txt", ProjectType.PYTHON),
    ("Cargo.toml", ProjectType.RUST),
    ("go.mod", ProjectType.GO),
    (GIT_MARKER, ProjectType.GIT),
]

# 365-day years and 30-day months, largest unit first.
TIME_UNITS: list[tuple[str, int]] = [
    ("year", 31_536_000),
    ("month", 2_592_000),
    ("week", 604_800),
    ("day", 86_400),
    ("hour", 3_600),
    ("minute", 60),
]


# ---------------------------------------------------------------------------
# Pure helpers
# ---------------------------------------------------------------------------


def similarity_score(name: str, search: str) -> float:
    """Score how well *name* matches *search* (both already lower-cased).

    Args:
        name: Candidate project name.
        search: Search term.

    Returns:
        ``1.0`` if *name* starts with *search*, ``0.5`` if it contains it
        further in, ``0.0`` if it does not contain it at all.
    """
    index = name.find(search)
    if index == 0:
        return 1.0
    if index > 0:
        return 0.5
    return 0.0


def detect_project_type(markers: Iterable[str]) -> ProjectType:
    """Classify a project from the marker files found in it.

    Args:
        markers: Marker file names present in the project directory.

    Returns:
        The ``ProjectType`` of the first matching marker, or ``UNKNOWN``.
    """
    found = set(markers)
    for marker, project_type in PROJECT_TYPE_MARKERS:
        if marker in found:
            return project_type
    return ProjectType.UNKNOWN


def time_ago(moment: datetime, now: datetime | None = None) -> str:
    """Render how long ago *moment* was, e.g. ``"3 days ago"``.

    Args:
        moment: Timezone-aware timestamp in the past.
        now: Reference time; defaults to the current UTC time.

    Returns:
        ``"<n> <unit>(s) ago"`` for the largest unit that fits at least once,
        otherwise ``"just now"``.
    """
    now = now or datetime.now(tz=UTC)
    seconds = math.floor((now - moment).total_seconds())
    for unit, unit_seconds in TIME_UNITS:
        interval = seconds // unit_seconds
        if interval >= 1:
            return f"{interval} {unit}{'' if interval == 1 else 's'} ago"
    return "just now"


def iso_timestamp(moment: datetime) -> str:
    """Format a UTC timestamp as ISO-8601 with milliseconds and a ``Z`` suffix."""
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _created_timestamp(stat_result: os.stat_result) -> float:
    """Return the birth time where the platform reports one, else ``st_ctime``."""
    return getattr(stat_result, "st_birthtime", None) or stat_result.st_ctime


def _to_json(payload: BaseModel | list[BaseModel]) -> str:
    """Serialise one model or a list of models as indented JSON with camelCase keys."""
    if isinstance(payload, list):
        data = [item.model_dump(mode="json", by_alias=True, exclude_none=True) for item in payload]
    else:
        data = payload.model_dump(mode="json", by_alias=True, exclude_none=True)
    return json.dumps(data, indent=2, ensure_ascii=False)


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


class ProjectDirectoryService:
    """Read-only queries over the projects directly under *project_root*.

    Attributes:
        project_root: Directory whose immediate sub-directories are projects.
        git_timeout_seconds: Bound on the ``git status`` call in ``project_info``.
    """

    def __init__(self, project_root: Path, git_timeout_seconds: float = 10.0) -> None:
        self.project_root = project_root
        self.git_timeout_seconds = git_timeout_seconds

    # ------------------------------------------------------------------
    # Filesystem primitives
    # ------------------------------------------------------------------

    def _project_names(self) -> list[str]:
        """List non-hidden directory names under the root, in listing order.

        Raises:
            OSError: If the root cannot be listed.
        """
        with os.scandir(self.project_root) as entries:
            return [
                entry.name
                for entry in entries
                if entry.is_dir(follow_symlinks=False) and not entry.name.startswith(HIDDEN_PREFIX)
            ]

    def _project_path(self, name: str) -> Path:
        return self.project_root / name

    def _stat_entry(self, name: str) -> ProjectEntry:
        """Stat one project directory.

        Raises:
            OSError: If the directory cannot be stat'ed.
        """
        path = self._project_path(name)
        stat_result = path.stat()
        return ProjectEntry(
            name=name,
            path=str(path),
            modified=datetime.fromtimestamp(stat_result.st_mtime, tz=UTC),
            created=datetime.fromtimestamp(_created_timestamp(stat_result), tz=UTC),
            size=stat_result.st_size,
        )

    async def _stat_entries(self, names: list[str]) -> list[ProjectEntry]:
        """Stat every name concurrently; results keep the order of *names*."""
        return list(await asyncio.gather(*(asyncio.to_thread(self._stat_entry, name) for name in names)))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def list_projects(self, filter: str | None = None, details: bool = False) -> QueryResult:
        """List projects, optionally filtered by a case-insensitive substring.

        Args:
            filter: Substring a project name must contain.  Empty or ``None``
                keeps every project.
            details: When true, return a JSON array with paths and timestamps
                instead of bare names.

        Returns:
            Newline-separated names, or the JSON listing.
        """
        try:
            names = await asyncio.to_thread(self._project_names)
            if filter:
                needle = filter.lower()
                names = [name for name in names if needle in name.lower()]

            if not details:
                return QueryResult(text="\n".join(names))

            entries = await self._stat_entries(names)
        except OSError as exc:
            logger.warning("Listing %s failed: %s", self.project_root, exc)
            return QueryResult(status=ResultStatus.ERROR, text=f"Error listing projects: {exc}")

        listing = [
            ProjectListing(
                name=entry.name,
                path=entry.path,
                modified=iso_timestamp(entry.modified),
                created=iso_timestamp(entry.created),
            )
            for entry in entries
        ]
        return QueryResult(text=_to_json(listing))

    async def find_project(self, name: str) -> QueryResult:
        """Find a project by exact name, falling back to substring matches.

        An exact case-insensitive match always wins.  Otherwise every project
        whose name contains *name* is ranked by ``similarity_score`` and the
        best five are listed.

        Args:
            name: Project name, or part of one.

        Returns:
            The exact match path, the ranked candidates, or a not-found message.
        """
        try:
            names = await asyncio.to_thread(self._project_names)
        except OSError as exc:
            logger.warning("Listing %s failed: %s", self.project_root, exc)
            return QueryResult(status=ResultStatus.ERROR, text=f"Error finding project: {exc}")

        search = name.lower()
        for candidate in names:
            if candidate.lower() == search:
                return QueryResult(text=f"Found exact match: {self._project_path(candidate)}")

        matches = [
            MatchCandidate(
                name=candidate,
                path=str(self._project_path(candidate)),
                score=similarity_score(candidate.lower(), search),
            )
            for candidate in names
            if search in candidate.lower()
        ]
        # sort() is stable, so equal scores keep listing order
        matches.sort(key=lambda match: match.score, reverse=True)

        if not matches:
            return QueryResult(status=ResultStatus.NOT_FOUND, text=f'No projects found matching "{name}"')

        lines = "\n".join(f"{match.name} ({match.path})" for match in matches[:MAX_FUZZY_RESULTS])
        return QueryResult(text=f"Found {len(matches)} matches:\n{lines}")

    async def project_info(self, name: str) -> QueryResult:
        """Describe one project: timestamps, child counts, type and git state.

        Args:
            name: Exact project directory name.

        Returns:
            A JSON ``ProjectDetail``, or a not-found / error message.
        """
        if name in ("", ".", "..") or "/" in name or os.sep in name:
            return QueryResult(
                status=ResultStatus.NOT_FOUND,
                text=f"Error getting project info: no project named {name!r} under {self.project_root}",
            )

        path = self._project_path(name)
        try:
            stat_result = await asyncio.to_thread(path.stat)
        except FileNotFoundError as exc:
            return QueryResult(status=ResultStatus.NOT_FOUND, text=f"Error getting project info: {exc}")
        except OSError as exc:
            logger.warning("Stat of %s failed: %s", path, exc)
            return QueryResult(status=ResultStatus.ERROR, text=f"Error getting project info: {exc}")

        try:
            markers = await asyncio.to_thread(self._present_markers, path)
            file_count, dir_count = await asyncio.to_thread(self._count_children, path)
        except OSError as exc:
            logger.warning("Inspecting %s failed: %s", path, exc)
            return QueryResult(status=ResultStatus.ERROR, text=f"Error getting project info: {exc}")

        git = None
        if GIT_MARKER in markers:
            git = await query_git_status(path, timeout_seconds=self.git_timeout_seconds)

        detail = ProjectDetail(
            name=name,
            path=str(path),
            created=iso_timestamp(datetime.fromtimestamp(_created_timestamp(stat_result), tz=UTC)),
            modified=iso_timestamp(datetime.fromtimestamp(stat_result.st_mtime, tz=UTC)),
            size=stat_result.st_size,
            files=file_count,
            directories=dir_count,
            project_type=detect_project_type(markers),
            project_files=markers,
            git=git,
        )
        return QueryResult(text=_to_json(detail))

    async def recent_projects(self, count: float | None = DEFAULT_RECENT_COUNT) -> QueryResult:
        """List the most recently modified projects, newest first.

        Args:
            count: How many projects to return.  ``None`` or ``0`` means
                ``DEFAULT_RECENT_COUNT``; fractions are truncated toward zero.

        Returns:
            A JSON array of ``RecentProject`` rows.
        """
        limit = int(count) if count else DEFAULT_RECENT_COUNT
        try:
            names = await asyncio.to_thread(self._project_names)
            entries = await self._stat_entries(names)
        except OSError as exc:
            logger.warning("Listing %s failed: %s", self.project_root, exc)
            return QueryResult(status=ResultStatus.ERROR, text=f"Error getting recent projects: {exc}")

        entries.sort(key=lambda entry: entry.modified, reverse=True)
        now = datetime.now(tz=UTC)
        recent = [
            RecentProject(
                name=entry.name,
                path=entry.path,
                modified=iso_timestamp(entry.modified),
                ago=time_ago(entry.modified, now),
            )
            for entry in entries[:limit]
        ]
        return QueryResult(text=_to_json(recent))

    # ------------------------------------------------------------------
    # Inspection helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _present_markers(path: Path) -> list[str]:
        """Return the marker files present in *path*, in check order."""
        return [marker for marker in MARKER_FILES if (path / marker).exists()]

    @staticmethod
    def _count_children(path: Path) -> tuple[int, int]:
        """Count immediate child files and directories of *path*.

        Symbolic links are not followed, so a link counts as neither.

        Raises:
            OSError: If *path* cannot be listed.
        """
        files = dirs = 0
        with os.scandir(path) as entries:
            for entry in entries:
                if entry.is_file(follow_symlinks=False):
                    files += 1
                elif entry.is_dir(follow_symlinks=False):
                    dirs += 1
        return files, dirs
