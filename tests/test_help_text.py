"""Tests for the help text builders."""

from pathlib import Path

import pytest

from project_finder.services.help_text import build_help_text

ROOT = Path("/srv/code")


@pytest.mark.parametrize("command", [None, "", "all"])
def test_overview(command: str | None) -> None:
    """No command, or ``all``, selects the overview naming the root.

    Args:
        command: Command argument as sent by the caller.
    """
    text = build_help_text(ROOT, command)
    assert text.startswith("📁 Project Finder Help")
    assert str(ROOT) in text
    for tool in ("list_projects", "find_project", "project_info", "recent_projects", "project_finder_help"):
        assert tool in text


@pytest.mark.parametrize(
    ("command", "heading"),
    [
        ("list_projects", "📋 list_projects - List all projects"),
        ("find_project", "🔍 find_project - Find specific project"),
        ("project_info", "ℹ️  project_info - Get project details"),
        ("recent_projects", "🕐 recent_projects - List recent projects"),
    ],
)
def test_command_pages(command: str, heading: str) -> None:
    """Each tool has its own page.

    Args:
        command: Tool name.
        heading: First line of its page.
    """
    assert build_help_text(ROOT, command).split("\n")[0] == heading


def test_list_projects_page_names_root() -> None:
    """The list_projects page is templated with the project root."""
    text = build_help_text(ROOT, "list_projects")
    assert f"Lists all directories in {ROOT}, excluding hidden folders." in text
    assert 'list_projects { "filter": "mcp" }' in text


def test_unknown_command() -> None:
    """Unrecognised commands get the literal fallback message."""
    assert build_help_text(ROOT, "deploy") == (
        "Command 'deploy' not found. Use 'project_finder_help' without arguments to see all commands."
    )
