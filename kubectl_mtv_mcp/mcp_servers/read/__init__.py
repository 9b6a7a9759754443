"""Read-only kubectl-mtv MCP server package.

- config.py: server configuration from environment
- mcp.py: FastMCP tool definitions + runner
- utils/: kubectl-mtv / kubectl query builders
"""

from .mcp import mcp, run_stdio

__all__ = ["mcp", "run_stdio"]
