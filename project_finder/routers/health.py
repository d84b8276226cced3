"""Health-check endpoint.

Reports whether the configured project root is readable and whether a ``git``
executable is installed for the ``project_info`` status check.
"""

import logging

from fastapi import APIRouter

from project_finder.models import HealthResponse
from project_finder.routers.tools import get_directory_service
from project_finder.services.git_status import git_available

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Return service health, project root state and git availability.

    Returns:
        A ``HealthResponse``; ``status`` is ``degraded`` when the project root
        is not an existing directory.
    """
    project_root = get_directory_service().project_root
    root_exists = project_root.is_dir()
    has_git = git_available()

    if not root_exists:
        logger.warning("Project root %s is not a directory", project_root)
    if not has_git:
        logger.warning("git not found on PATH -- project_info will omit git status")

    return HealthResponse(
        status="ok" if root_exists else "degraded",
        project_root=str(project_root),
        project_root_exists=root_exists,
        git_available=has_git,
    )
