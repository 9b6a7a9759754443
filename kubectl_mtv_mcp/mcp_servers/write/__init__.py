"""Mutating kubectl-mtv MCP server package.

- config.py: server configuration from environment
- mcp.py: FastMCP tool definitions + runner
- utils/: kubectl-mtv command builders for plans, providers, mappings,
  hosts, hooks and deletions
"""

from .mcp import mcp, run_stdio

__all__ = ["mcp", "run_stdio"]
