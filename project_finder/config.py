"""Application configuration backed by Pydantic Settings.

The project root is read from ``CODE_PATH``.  Every other value can be
overridden via environment variables prefixed with ``PROJECT_FINDER_``
(e.g. ``PROJECT_FINDER_PORT=9000``) or via a ``.env`` file in the working
directory.
"""

from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


def _default_project_root() -> Path:
    """Return the default project root: the parent of this tool's checkout.

    The tool normally lives next to the projects it browses, so the directory
    that contains the install location is the natural place to look.

    Returns:
        Resolved absolute path to the default project root.
    """
    install_dir = Path(__file__).resolve().parent.parent
    return install_dir.parent


class FinderSettings(BaseSettings):
    """Central configuration for the project finder.

    Values are loaded from environment variables, a ``.env`` file, or fall
    back to sensible defaults.  An instance is built once at startup and
    passed explicitly to every component that needs it.

    Attributes:
        project_root: Directory whose immediate sub-directories are projects.
        host: Network interface the HTTP transport binds to.
        port: TCP port for the HTTP transport.
        git_timeout_seconds: Maximum wall-clock seconds for one ``git status`` call.
        log_level: Root logging level name.
    """

    model_config = {
        "env_prefix": "PROJECT_FINDER_",
        "env_file": ".env",
        "extra": "ignore",
        "populate_by_name": True,
    }

    project_root: Path = Field(
        default_factory=_default_project_root,
        validation_alias=AliasChoices("CODE_PATH", "PROJECT_FINDER_PROJECT_ROOT"),
    )
    host: str = "127.0.0.1"
    port: int = 8424
    git_timeout_seconds: float = 10.0
    log_level: str = "INFO"
