# =============================================================================
# main.py  -  Entry point for the Biopics MCP server
# =============================================================================
#
# HOW TO RUN:
#   biopics-mcp                 (console script)
#   python -m biopics_mcp
#   biopics-mcp --version       (prints the version and exits)
#
# WHAT HAPPENS:
#   1. --version is handled first: print and exit, nothing else is touched
#   2. .env is loaded (BIOPICS_AGENT, BIOPICS_MODEL, BIOPICS_USER_TOKEN)
#   3. Logging is pointed at STDERR (STDOUT is the MCP stdio stream)
#   4. Settings are read once and injected into the server
#   5. The server runs over stdio until the host closes the pipe
#
# A failure to bring up the transport is fatal: it is logged and the process
# exits with status 1.
# =============================================================================

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

from biopics_mcp import __version__
from biopics_mcp.core.config import Settings
from biopics_mcp.tools.mcp_server import create_server


def configure_logging(level: str = "INFO") -> None:
    """Send all log output to STDERR so it never mixes with MCP messages."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="biopics-mcp",
        description="MCP server for collaborating on biographical documentaries at biopics.ai",
    )
    parser.add_argument("--version", action="version", version=__version__)
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the server.  Returns the process exit status."""
    parse_args(argv)

    load_dotenv()
    configure_logging(os.environ.get("BIOPICS_LOG_LEVEL", "INFO"))

    settings = Settings.from_env()
    logging.info(f"biopics-mcp v{__version__} starting (agent={settings.agent_name})")

    try:
        server = create_server(settings)
        server.run(transport="stdio")
    except Exception:
        logging.exception("Fatal: MCP server stopped")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
