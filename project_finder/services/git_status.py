"""Git status check -- runs ``git status --porcelain`` inside a project directory.

Uses ``subprocess.run`` via ``asyncio.to_thread`` so the event loop is not
blocked while git walks the working tree.  Every failure mode (git not
installed, not a repository, non-zero exit, timeout) is reported as ``None``:
a broken git call must never take down the caller's request.
"""

import asyncio
import logging
import shutil
import subprocess
from pathlib import Path

from project_finder.models import GitSummary

logger = logging.getLogger(__name__)

GIT_STATUS_ARGS = ["git", "status", "--porcelain"]


def git_available() -> bool:
    """Return whether a ``git`` executable can be found on PATH."""
    return shutil.which("git") is not None


def count_changed_lines(porcelain: str) -> int:
    """Count non-blank lines of porcelain output.

    Staged, unstaged and untracked entries are all counted alike.

    Args:
        porcelain: Raw stdout of ``git status --porcelain``.

    Returns:
        Number of lines that contain anything besides whitespace.
    """
    return sum(1 for line in porcelain.split("\n") if line.strip())


def _run_blocking(project_path: Path, timeout_seconds: float) -> str:
    """Run ``git status --porcelain`` and return its stdout.

    This runs in a background thread so the async event loop is not blocked.

    Args:
        project_path: Working directory for the subprocess.
        timeout_seconds: Maximum wall-clock seconds before killing the process.

    Returns:
        The command's stdout.

    Raises:
        subprocess.CalledProcessError: If git exits non-zero.
        subprocess.TimeoutExpired: If git exceeds the timeout.
        OSError: If git cannot be started.
    """
    result = subprocess.run(
        GIT_STATUS_ARGS,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        cwd=project_path,
        timeout=timeout_seconds,
        check=True,
        text=True,
        encoding="utf-8",
        errors="replace",
    )
    return result.stdout


async def query_git_status(project_path: Path, timeout_seconds: float = 10.0) -> GitSummary | None:
    """Summarise the working tree of the repository at *project_path*.

    Args:
        project_path: Directory to run git in.
        timeout_seconds: Maximum seconds the git process may run.

    Returns:
        A ``GitSummary``, or ``None`` when the git call failed for any reason.
    """
    try:
        stdout = await asyncio.to_thread(_run_blocking, project_path, timeout_seconds)
    except subprocess.CalledProcessError as exc:
        logger.debug("git status exited with %s in %s: %s", exc.returncode, project_path, (exc.stderr or "").strip())
        return None
    except subprocess.TimeoutExpired:
        logger.debug("git status timed out after %ss in %s", timeout_seconds, project_path)
        return None
    except OSError as exc:
        logger.debug("git status could not run in %s: %s", project_path, exc)
        return None

    return GitSummary(modified_files=count_changed_lines(stdout))
