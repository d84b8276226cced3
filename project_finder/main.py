"""FastAPI application entry point for the project finder HTTP transport.

This module creates the FastAPI ``app`` instance, registers the routers, and
wires a ``ProjectDirectoryService`` bound to the configured project root into
them.  The server is started via ``uvicorn`` using the settings from
``project_finder.config``.
"""

import logging

import uvicorn
from fastapi import FastAPI

from project_finder import __version__
from project_finder.config import FinderSettings
from project_finder.routers import health, tools
from project_finder.services.project_directory import ProjectDirectoryService

logger = logging.getLogger(__name__)


def create_app(settings: FinderSettings | None = None) -> FastAPI:
    """Build and configure the FastAPI application.

    Args:
        settings: Configuration to use; read from the environment when omitted.

    Returns:
        A fully configured ``FastAPI`` application ready to serve.
    """
    settings = settings or FinderSettings()

    app = FastAPI(
        title="Project Finder",
        description=f"Fast project discovery and navigation for {settings.project_root}",
        version=__version__,
    )

    service = ProjectDirectoryService(settings.project_root, git_timeout_seconds=settings.git_timeout_seconds)
    tools.set_directory_service(service)

    app.include_router(health.router)
    app.include_router(tools.router)

    logger.info("Project finder initialised -- project_root=%s", settings.project_root)
    return app


def main() -> None:
    """Start the Uvicorn server with settings from the environment.

    This is the CLI entry point (``project-finder-http``).
    """
    settings = FinderSettings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.info("Starting project finder on %s:%d", settings.host, settings.port)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        reload=False,
    )


if __name__ == "__main__":
    main()
