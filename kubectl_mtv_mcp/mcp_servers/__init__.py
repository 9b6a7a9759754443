"""MCP server implementations.

Each server package has the same layout (``config.py``, ``mcp.py``,
``utils/``) and shares the command-execution layer in :mod:`.common`.
"""
