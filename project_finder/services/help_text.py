"""Help text builders for the ``project_finder_help`` tool.

Each tool has its own page; the overview lists them all.  Pages that mention
the project root are templated with the configured path.
"""

from pathlib import Path

OVERVIEW_COMMANDS = ("all",)


def _overview(project_root: Path) -> str:
    return f"""📁 Project Finder Help
======================

Fast project discovery and navigation for {project_root} directory.

Available commands:

📋 list_projects - List all projects with optional filtering
   Optional: filter, details

🔍 find_project - Find specific project by name
   Required: name

ℹ️  project_info - Get detailed project information
   Required: name

🕐 recent_projects - List recently modified projects
   Optional: count

❓ project_finder_help - Show this help
   Optional: command (specific command for details)

Use 'project_finder_help' with a specific command for detailed information."""


def _list_projects_help(project_root: Path) -> str:
    return f"""📋 list_projects - List all projects

Lists all directories in {project_root}, excluding hidden folders.

Parameters:
- filter: Filter pattern for project names (optional)
- details: Include modification dates and paths (default: false)

Examples:
// Simple list
list_projects {{}}

// Filtered list
list_projects {{ "filter": "mcp" }}

// Detailed list with timestamps
list_projects {{
  "filter": "brain",
  "details": true
}}

Returns:
- Simple mode: Newline-separated list of project names
- Details mode: JSON array with name, path, modified, created"""


FIND_PROJECT_HELP = """🔍 find_project - Find specific project

Searches for a project by name with fuzzy matching support.

Parameters:
- name (required): Project name to search for

Examples:
find_project { "name": "brain" }
find_project { "name": "mcp-todo" }

Features:
- Exact match takes priority
- Fuzzy matching for partial names
- Returns up to 5 best matches
- Sorted by match quality

Returns:
- Exact match: Full path to project
- Fuzzy matches: List of matching projects with paths"""

PROJECT_INFO_HELP = """ℹ️  project_info - Get project details

Provides comprehensive information about a specific project.

Parameters:
- name (required): Exact project name

Example:
project_info { "name": "mcp-brain-manager" }

Returns JSON with:
- name: Project name
- path: Full path
- created: Creation date
- modified: Last modification date
- size: Directory entry size in bytes
- files: Number of files
- directories: Number of subdirectories
- projectType: Detected type (Node.js, Python, etc.)
- projectFiles: List of key files found
- git: Git status info (if applicable)

Project type detection:
- Node.js: Has package.json
- Python: Has requirements.txt
- Rust: Has Cargo.toml
- Go: Has go.mod
- Git: Has .git directory"""

RECENT_PROJECTS_HELP = """🕐 recent_projects - List recent projects

Shows projects sorted by last modification time.

Parameters:
- count: Number of projects to return (default: 10)

Example:
recent_projects { "count": 5 }

Returns JSON array with:
- name: Project name
- path: Full path
- modified: ISO timestamp
- ago: Human-readable time (e.g., "2 hours ago")

Notes:
- Sorted by most recently modified first
- Excludes hidden directories
- Includes relative time for easy scanning"""


def build_help_text(project_root: Path, command: str | None = None) -> str:
    """Return the help page for *command*, or the overview when none is given.

    Args:
        project_root: Configured project root, quoted on pages that mention it.
        command: Tool name to describe; ``None``, empty or ``"all"`` selects
            the overview.

    Returns:
        The help text, or a not-found message for an unrecognised command.
    """
    if not command or command in OVERVIEW_COMMANDS:
        return _overview(project_root)

    if command == "list_projects":
        return _list_projects_help(project_root)
    if command == "find_project":
        return FIND_PROJECT_HELP
    if command == "project_info":
        return PROJECT_INFO_HELP
    if command == "recent_projects":
        return RECENT_PROJECTS_HELP

    return f"Command '{command}' not found. Use 'project_finder_help' without arguments to see all commands."
