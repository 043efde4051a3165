# =============================================================================
# core/__init__.py
# =============================================================================
# Framework-agnostic building blocks for the Biopics tool server.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP.  The tools/ layer wraps these
#   pieces into MCP tools; everything here can be exercised from a plain
#   asyncio test with a fake HTTP transport.
# =============================================================================

from biopics_mcp.core.client import BiopicsClient
from biopics_mcp.core.config import Settings
from biopics_mcp.core.errors import ApiError, BiopicsError
from biopics_mcp.core.models import Envelope

__all__ = [
    "ApiError",
    "BiopicsClient",
    "BiopicsError",
    "Envelope",
    "Settings",
]
