"""MCP stdio server exposing the project finder tools.

Each tool is a thin wrapper around ``ProjectDirectoryService``: it forwards the
arguments, logs the call, and returns the result text.  FastMCP wraps that text
as a single text content item, so domain errors reach the client as ordinary
tool output.  Only an unknown tool name surfaces as a protocol-level error
(a JSON-RPC error response).

Run with ``project-finder`` or ``python -m project_finder.mcp_server``.
"""

import logging
import sys

from mcp import types
from mcp.server.fastmcp import FastMCP
from mcp.shared.exceptions import McpError

from project_finder.config import FinderSettings
from project_finder.models import QueryResult
from project_finder.services.help_text import build_help_text
from project_finder.services.project_directory import ProjectDirectoryService
from project_finder.tool_registry import UnknownToolError, resolve_tool, tool_descriptions

logger = logging.getLogger(__name__)

SERVER_NAME = "mcp-project-finder"


def _respond(tool_name: str, result: QueryResult) -> str:
    """Log the outcome of a tool call and return its text."""
    if result.ok:
        logger.info("%s -> %d chars", tool_name, len(result.text))
    else:
        logger.info("%s -> %s: %s", tool_name, result.status, result.text)
    return result.text


def _reject_unknown_tools(mcp: FastMCP) -> None:
    """Answer calls to unregistered tools with a JSON-RPC error.

    FastMCP's own ``tools/call`` handler turns every exception, including an
    unknown tool name, into an ordinary result with ``isError`` set.  The
    wrapper rejects unknown names before that handler runs, so the request
    dispatcher replies with an ``INVALID_PARAMS`` error instead.

    Args:
        mcp: Server whose ``tools/call`` handler is wrapped in place.
    """
    handlers = mcp._mcp_server.request_handlers
    handle_call = handlers[types.CallToolRequest]

    async def call_known_tool(request: types.CallToolRequest) -> types.ServerResult:
        try:
            resolve_tool(request.params.name)
        except UnknownToolError as exc:
            logger.warning("Rejected call to unknown tool %r", request.params.name)
            raise McpError(types.ErrorData(code=types.INVALID_PARAMS, message=str(exc))) from exc
        return await handle_call(request)

    handlers[types.CallToolRequest] = call_known_tool


def build_mcp_server(service: ProjectDirectoryService) -> FastMCP:
    """Create a FastMCP server whose tools query *service*.

    Args:
        service: Directory service bound to the configured project root.

    Returns:
        A ``FastMCP`` instance with all five tools registered.
    """
    descriptions = tool_descriptions(service.project_root)
    mcp = FastMCP(
        SERVER_NAME,
        instructions=f"Fast project discovery and navigation for {service.project_root}",
    )

    @mcp.tool(description=descriptions["list_projects"])
    async def list_projects(filter: str | None = None, details: bool = False) -> str:
        """List projects, optionally filtered and with timestamps."""
        logger.info("list_projects called with filter=%r, details=%r", filter, details)
        return _respond("list_projects", await service.list_projects(filter=filter, details=details))

    @mcp.tool(description=descriptions["find_project"])
    async def find_project(name: str) -> str:
        """Find a project by exact or partial name."""
        logger.info("find_project called with name=%r", name)
        return _respond("find_project", await service.find_project(name))

    @mcp.tool(description=descriptions["project_info"])
    async def project_info(name: str) -> str:
        """Describe one project."""
        logger.info("project_info called with name=%r", name)
        return _respond("project_info", await service.project_info(name))

    @mcp.tool(description=descriptions["recent_projects"])
    async def recent_projects(count: float = 10) -> str:
        """List the most recently modified projects."""
        logger.info("recent_projects called with count=%r", count)
        return _respond("recent_projects", await service.recent_projects(count))

    @mcp.tool(description=descriptions["project_finder_help"])
    def project_finder_help(command: str | None = None) -> str:
        """Show help for all tools or one of them."""
        return build_help_text(service.project_root, command)

    _reject_unknown_tools(mcp)
    return mcp


def main() -> None:
    """Start the MCP server on stdio with settings from the environment.

    Logging goes to stderr; stdout carries the MCP message stream.
    """
    settings = FinderSettings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    service = ProjectDirectoryService(settings.project_root, git_timeout_seconds=settings.git_timeout_seconds)
    mcp = build_mcp_server(service)

    logger.info("Project Finder MCP server running on stdio (project_root=%s)", settings.project_root)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
