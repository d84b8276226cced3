"""Pydantic models for the project finder's tool contracts and internal records.

This module defines every tool argument, tool response, and internal record used
by the project directory service.  All structured data flows through these
models -- no loose dicts.
"""

from __future__ import annotations

import enum
from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class ResultStatus(enum.StrEnum):
    """Outcome tag carried by every ``QueryResult``."""

    OK = "ok"
    NOT_FOUND = "not_found"
    ERROR = "error"


class ProjectType(enum.StrEnum):
    """Project kinds recognised from marker files.

    Detection order lives in ``project_directory.detect_project_type``; a
    project can satisfy several markers, so the order matters.
    """

    NODE = "Node.js"
    PYTHON = "Python"
    RUST = "Rust"
    GO = "Go"
    GIT = "Git repository"
    UNKNOWN = "Unknown"


# ---------------------------------------------------------------------------
# Tagged result
# ---------------------------------------------------------------------------


class QueryResult(BaseModel):
    """Result of one directory query: a status tag plus the text for the caller.

    Domain failures (unreadable root, unknown project) are represented here
    instead of being raised, so the tool layer can always answer with text.
    """

    status: ResultStatus = Field(default=ResultStatus.OK, description="Outcome of the query")
    text: str = Field(description="Rendered payload, or the user-facing message on failure")

    @property
    def ok(self) -> bool:
        """True when the query produced its payload."""
        return self.status == ResultStatus.OK


# ---------------------------------------------------------------------------
# Project records
# ---------------------------------------------------------------------------


class ProjectEntry(BaseModel):
    """A non-hidden directory directly under the project root, with its stat data."""

    name: str = Field(description="Directory name")
    path: str = Field(description="Absolute path to the directory")
    modified: datetime = Field(description="Last modification time (UTC)")
    created: datetime = Field(description="Creation time (UTC), or inode change time where unavailable")
    size: int = Field(default=0, description="Size reported by stat, in bytes")


class MatchCandidate(BaseModel):
    """A project whose name contains the search term, with its similarity score."""

    name: str
    path: str
    score: float


class ProjectListing(BaseModel):
    """One row of the detailed ``list_projects`` output."""

    name: str
    path: str
    modified: str = Field(description="ISO-8601 modification timestamp")
    created: str = Field(description="ISO-8601 creation timestamp")


class RecentProject(BaseModel):
    """One row of the ``recent_projects`` output."""

    name: str
    path: str
    modified: str = Field(description="ISO-8601 modification timestamp")
    ago: str = Field(description="Human-readable age, e.g. '2 hours ago'")


class GitSummary(BaseModel):
    """Working-tree summary from ``git status --porcelain``."""

    modified_files: int = Field(
        serialization_alias="modifiedFiles",
        description="Number of non-blank porcelain lines (staged, unstaged and untracked alike)",
    )


class ProjectDetail(BaseModel):
    """Everything ``project_info`` reports about a single project.

    Serialised with camelCase keys; ``git`` is dropped entirely when the
    project is not a repository or the status call failed.
    """

    name: str
    path: str
    created: str = Field(description="ISO-8601 creation timestamp")
    modified: str = Field(description="ISO-8601 modification timestamp")
    size: int = Field(description="Size reported by stat, in bytes")
    files: int = Field(description="Immediate child files")
    directories: int = Field(description="Immediate child directories")
    project_type: ProjectType = Field(serialization_alias="projectType")
    project_files: list[str] = Field(default_factory=list, serialization_alias="projectFiles")
    git: GitSummary | None = None


# ---------------------------------------------------------------------------
# Tool arguments
# ---------------------------------------------------------------------------


class ListProjectsArgs(BaseModel):
    """Arguments for ``list_projects``."""

    filter: str | None = Field(default=None, description="Optional filter pattern for project names")
    details: bool = Field(default=False, description="Include details like last modified date")


class FindProjectArgs(BaseModel):
    """Arguments for ``find_project``."""

    name: str = Field(description="Project name to search for")


class ProjectInfoArgs(BaseModel):
    """Arguments for ``project_info``."""

    name: str = Field(description="Project name")


class RecentProjectsArgs(BaseModel):
    """Arguments for ``recent_projects``."""

    count: float = Field(default=10, description="Number of recent projects to return; fractions are truncated")


class HelpArgs(BaseModel):
    """Arguments for ``project_finder_help``."""

    command: str | None = Field(
        default=None,
        description='Specific command to get help for (or "all" for overview)',
    )


# ---------------------------------------------------------------------------
# HTTP transport
# ---------------------------------------------------------------------------


class ToolCallRequest(BaseModel):
    """Request body for ``POST /tools/{tool_name}``."""

    arguments: dict[str, Any] = Field(default_factory=dict, description="Named tool parameters")


class TextContent(BaseModel):
    """A single text content item."""

    type: Literal["text"] = "text"
    text: str


class ToolCallResponse(BaseModel):
    """Response payload for ``POST /tools/{tool_name}``.

    Always carries exactly one text item, including for domain errors.
    """

    content: list[TextContent] = Field(description="Tool output as content items")
    is_error: bool = Field(default=False, serialization_alias="isError", description="True for error results")


class ToolDescriptor(BaseModel):
    """Name and description of one registered tool."""

    name: str
    description: str


class HealthResponse(BaseModel):
    """Response payload for ``GET /health``."""

    status: str = Field(description="'ok' when the project root exists, otherwise 'degraded'")
    project_root: str = Field(description="Configured project root")
    project_root_exists: bool = Field(description="Whether the project root is an existing directory")
    git_available: bool = Field(description="Whether a git executable is on PATH")
