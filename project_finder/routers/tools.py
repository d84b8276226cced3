"""Tool endpoints -- list the registered tools and invoke one by name.

Every successful call answers with a single text content item, including
domain failures such as a missing project root.  Only contract violations
(unknown tool name, malformed arguments) become HTTP errors.
"""

import logging

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from project_finder.models import ResultStatus, TextContent, ToolCallRequest, ToolCallResponse, ToolDescriptor
from project_finder.services.project_directory import ProjectDirectoryService
from project_finder.tool_registry import UnknownToolError, call_tool, list_tools

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tools"])

_service: ProjectDirectoryService | None = None


def set_directory_service(service: ProjectDirectoryService) -> None:
    """Wire the shared ``ProjectDirectoryService`` into this router module.

    Args:
        service: The application-wide directory service.
    """
    global _service
    _service = service


def get_directory_service() -> ProjectDirectoryService:
    """Return the wired service or raise if not initialised.

    Raises:
        HTTPException: If the service has not been set yet.
    """
    if _service is None:
        raise HTTPException(status_code=503, detail="ProjectDirectoryService not initialised")
    return _service


@router.get("/tools", response_model=list[ToolDescriptor])
async def get_tools() -> list[ToolDescriptor]:
    """Describe every tool this service answers."""
    return list_tools(get_directory_service().project_root)


@router.post("/tools/{tool_name}", response_model=ToolCallResponse)
async def invoke_tool(tool_name: str, request: ToolCallRequest) -> ToolCallResponse:
    """Run one tool and wrap its text as a single content item.

    Args:
        tool_name: Registered tool name, e.g. ``find_project``.
        request: Named tool parameters.

    Returns:
        A ``ToolCallResponse`` with one text item; ``isError`` is set when the
        tool reported an error.

    Raises:
        HTTPException: 404 for an unknown tool, 422 for invalid arguments.
    """
    service = get_directory_service()
    try:
        result = await call_tool(service, tool_name, request.arguments)
    except UnknownToolError as exc:
        logger.warning("Rejected call to unknown tool %r", tool_name)
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.errors(include_url=False)) from exc

    logger.info("%s called with %s -> %s", tool_name, request.arguments, result.status)
    return ToolCallResponse(
        content=[TextContent(text=result.text)],
        is_error=result.status == ResultStatus.ERROR,
    )
