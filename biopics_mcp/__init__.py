# =============================================================================
# biopics_mcp  -  MCP tool server for the Biopics collaboration API
# =============================================================================
#
# LAYOUT:
#   core/   -> settings, HTTP client, request builders, response envelope
#   tools/  -> the FastMCP server and its tool definitions
#   main.py -> process entry point (--version, .env, logging, stdio transport)
# =============================================================================

__version__ = "1.4.0"
