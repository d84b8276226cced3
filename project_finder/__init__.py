"""Browse a directory of code projects over MCP or HTTP."""

__version__ = "1.1.0"
