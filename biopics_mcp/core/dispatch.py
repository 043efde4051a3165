# =============================================================================
# core/dispatch.py  -  The catch-and-wrap boundary
# =============================================================================
#
# One function turns "an awaitable that returns JSON or raises" into exactly
# one Envelope.  The tools/ layer applies it to every handler through a
# single decorator, so no tool can leak an exception to the MCP host.
#
# Only Exception is caught: asyncio cancellation (a BaseException) still
# propagates, which is what the host runtime expects when it cancels a call.
# =============================================================================

import logging
from typing import Any, Awaitable, Callable

from biopics_mcp.core.models import Envelope

logger = logging.getLogger(__name__)


async def dispatch(call: Callable[[], Awaitable[Any]]) -> Envelope:
    """Await ``call()`` and wrap its result (or its failure) in an Envelope."""
    try:
        return Envelope.success(await call())
    except Exception as exc:
        logger.debug("tool call failed", exc_info=True)
        return Envelope.failure(exc)
