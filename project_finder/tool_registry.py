"""Tool registry -- the fixed set of tools and how a call is routed to the service.

Every transport exposes exactly these tools.  A call naming any other tool is a
client contract violation, not a domain condition, so it is the one failure
raised as an exception (``UnknownToolError``) instead of returned as text.
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel

from project_finder.models import (
    FindProjectArgs,
    HelpArgs,
    ListProjectsArgs,
    ProjectInfoArgs,
    QueryResult,
    RecentProjectsArgs,
    ToolDescriptor,
)
from project_finder.services.help_text import build_help_text
from project_finder.services.project_directory import ProjectDirectoryService

TOOL_ARGUMENTS: dict[str, type[BaseModel]] = {
    "list_projects": ListProjectsArgs,
    "find_project": FindProjectArgs,
    "project_info": ProjectInfoArgs,
    "recent_projects": RecentProjectsArgs,
    "project_finder_help": HelpArgs,
}


class UnknownToolError(Exception):
    """Raised when a caller names a tool that is not registered.

    Attributes:
        name: The tool name the caller asked for.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


def tool_descriptions(project_root: Path) -> dict[str, str]:
    """Return the description of every tool, keyed by name, in registry order.

    Args:
        project_root: Configured project root, quoted where relevant.
    """
    return {
        "list_projects": f"List all projects in {project_root} with optional filtering",
        "find_project": "Find a specific project by name (fuzzy matching supported)",
        "project_info": "Get detailed information about a project",
        "recent_projects": "List recently modified projects",
        "project_finder_help": "Get help on using the project finder tools",
    }


def list_tools(project_root: Path) -> list[ToolDescriptor]:
    """Describe every registered tool."""
    return [ToolDescriptor(name=name, description=text) for name, text in tool_descriptions(project_root).items()]


def resolve_tool(name: str) -> type[BaseModel]:
    """Return the argument model for *name*.

    Args:
        name: Requested tool name.

    Returns:
        The pydantic model that validates the tool's arguments.

    Raises:
        UnknownToolError: When *name* is not a registered tool.
    """
    try:
        return TOOL_ARGUMENTS[name]
    except KeyError:
        raise UnknownToolError(name) from None


async def call_tool(service: ProjectDirectoryService, name: str, arguments: dict[str, Any]) -> QueryResult:
    """Validate *arguments* for tool *name* and run it against *service*.

    Args:
        service: The directory service answering the query.
        name: Registered tool name.
        arguments: Raw named parameters from the caller.

    Returns:
        The tool's ``QueryResult``.

    Raises:
        UnknownToolError: When *name* is not a registered tool.
        pydantic.ValidationError: When *arguments* do not fit the tool.
    """
    args = resolve_tool(name).model_validate(arguments)

    if isinstance(args, ListProjectsArgs):
        return await service.list_projects(filter=args.filter, details=args.details)
    if isinstance(args, FindProjectArgs):
        return await service.find_project(args.name)
    if isinstance(args, ProjectInfoArgs):
        return await service.project_info(args.name)
    if isinstance(args, RecentProjectsArgs):
        return await service.recent_projects(args.count)

    # HelpArgs is the only model left
    return QueryResult(text=build_help_text(service.project_root, args.command))
