"""Tests for tool routing and the unknown-tool contract."""

import asyncio
from pathlib import Path

import pytest
from pydantic import ValidationError

from project_finder.models import FindProjectArgs, ResultStatus
from project_finder.services.project_directory import ProjectDirectoryService
from project_finder.tool_registry import TOOL_ARGUMENTS, UnknownToolError, call_tool, list_tools, resolve_tool


def test_registry_has_five_tools() -> None:
    """The registry names exactly the five public tools."""
    assert list(TOOL_ARGUMENTS) == [
        "list_projects",
        "find_project",
        "project_info",
        "recent_projects",
        "project_finder_help",
    ]


def test_list_tools_mentions_root() -> None:
    """The list_projects description quotes the project root."""
    descriptors = {d.name: d.description for d in list_tools(Path("/srv/code"))}
    assert descriptors["list_projects"] == "List all projects in /srv/code with optional filtering"


def test_resolve_known_tool() -> None:
    """Known tools resolve to their argument model."""
    assert resolve_tool("find_project") is FindProjectArgs


def test_resolve_unknown_tool_raises() -> None:
    """Unknown tool names raise ``UnknownToolError`` carrying the name."""
    with pytest.raises(UnknownToolError) as exc_info:
        resolve_tool("delete_everything")
    assert exc_info.value.name == "delete_everything"
    assert str(exc_info.value) == "Unknown tool: delete_everything"


def test_call_routes_to_service(service: ProjectDirectoryService, project_root: Path) -> None:
    """Arguments are validated and forwarded to the matching query.

    Args:
        service: Fixture-provided directory service.
        project_root: Fixture-provided temporary project root.
    """
    result = asyncio.run(call_tool(service, "find_project", {"name": "rusty"}))
    assert result.text == f"Found exact match: {project_root / 'rusty'}"

    result = asyncio.run(call_tool(service, "list_projects", {"filter": "web"}))
    assert result.text == "web-app"

    result = asyncio.run(call_tool(service, "recent_projects", {"count": 1}))
    assert '"name": "web-app"' in result.text


def test_call_help(service: ProjectDirectoryService) -> None:
    """Help is answered from the service's project root.

    Args:
        service: Fixture-provided directory service.
    """
    result = asyncio.run(call_tool(service, "project_finder_help", {"command": "nope"}))
    assert result.status == ResultStatus.OK
    assert result.text.startswith("Command 'nope' not found.")


def test_missing_required_argument(service: ProjectDirectoryService) -> None:
    """A required argument that is absent fails validation.

    Args:
        service: Fixture-provided directory service.
    """
    with pytest.raises(ValidationError):
        asyncio.run(call_tool(service, "project_info", {}))


def test_unknown_tool_call_raises(service: ProjectDirectoryService) -> None:
    """Calling an unregistered tool is a contract violation.

    Args:
        service: Fixture-provided directory service.
    """
    with pytest.raises(UnknownToolError):
        asyncio.run(call_tool(service, "rm_rf", {}))


def test_call_help_overview(service: ProjectDirectoryService) -> None:
    """Help without a command is routed to the overview.

    Args:
        service: Fixture-provided directory service.
    """
    result = asyncio.run(call_tool(service, "project_finder_help", {}))
    assert result.status == ResultStatus.OK
    assert result.text.startswith("📁 Project Finder Help")


def test_fractional_count_is_truncated(service: ProjectDirectoryService) -> None:
    """A numeric count with a fraction is accepted and truncated.

    Args:
        service: Fixture-provided directory service.
    """
    result = asyncio.run(call_tool(service, "recent_projects", {"count": 2.5}))
    assert result.text.count('"name"') == 2
