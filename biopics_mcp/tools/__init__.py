# =============================================================================
# tools/__init__.py
# =============================================================================
# The FastMCP layer.
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between MCP and the Biopics API.  It:
#     1. Declares each tool (name, docstring description, typed parameters)
#     2. Builds the request with core/routes.py and sends it with core/client.py
#     3. Turns the outcome into an envelope via the shared @guarded wrapper
#
# WHAT TOOLS DO NOT DO:
#   - No business logic: assignment selection, scoring and review all live in
#     the remote service
#   - No caching and no retries: every call goes straight to the API
# =============================================================================

from biopics_mcp.tools.mcp_server import create_server

__all__ = ["create_server"]
