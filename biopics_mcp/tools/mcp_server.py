# =============================================================================
# tools/mcp_server.py  -  FastMCP tool server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines every MCP tool the agent can call.  Each tool is a thin wrapper
#   around the Biopics REST API: it turns typed arguments into a path (and a
#   body), hands it to core/client.py and returns the JSON it gets back.
#
# HOW IT WORKS (the flow):
#   1. The agent calls a tool by name via MCP (e.g. "get_assignment")
#   2. FastMCP validates the arguments against the annotated signature;
#      bad arguments never reach the network
#   3. The @guarded wrapper runs the handler through core.dispatch, which
#      turns the JSON result OR the exception into exactly one Envelope
#   4. Success envelopes go back as pretty-printed JSON text; error envelopes
#      go back through ToolError, which FastMCP reports with isError=true
#
# TOOL DESCRIPTIONS:
#   The docstring of each tool IS its description.  The agent reads it to
#   decide when to call the tool, so it says what the API returns and what
#   the agent is expected to do with it.
#
# CONFIGURATION:
#   create_server() receives Settings (and optionally a ready-made client).
#   Nothing here reads the environment.
# =============================================================================

import functools
import logging
from typing import Annotated, Literal, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from biopics_mcp.core.client import BiopicsClient
from biopics_mcp.core.config import Settings
from biopics_mcp.core.dispatch import dispatch
from biopics_mcp.core.models import Envelope
from biopics_mcp.core.routes import contribution_body, query_path, slug_path

SERVER_NAME = "biopics"

SERVER_INSTRUCTIONS = (
    "Collaborate on biographical documentaries at biopics.ai. "
    "Start with find_needs or browse_people to pick a person, call "
    "get_assignment for that person's slug and follow its instructions, then "
    "send your work with submit_contribution."
)

# =============================================================================
# Logging helpers
# =============================================================================
# Logs go to STDERR (configured in main.py).  STDOUT carries the MCP stdio
# stream; anything printed there would corrupt the protocol.
#
#   CYAN   -> incoming tool calls with their arguments
#   GREEN  -> success responses
#   YELLOW -> error envelopes and status messages
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

_LOG_PREVIEW_CHARS = 500

logger = logging.getLogger(__name__)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items() if v is not None)
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_response(tool_name: str, envelope: Envelope) -> None:
    """Log a compact preview of the envelope: GREEN for data, YELLOW for errors."""
    preview = " ".join(envelope.text.split())[:_LOG_PREVIEW_CHARS]
    if envelope.is_error:
        logger.info(f"{_YELLOW}  ← {tool_name} failed: {preview}{_RESET}")
    else:
        logger.info(f"{_GREEN}  ← {tool_name} response: {preview}{_RESET}")


def deliver(envelope: Envelope) -> str:
    """Hand an envelope to FastMCP.

    Error envelopes are raised as ToolError: FastMCP passes its message through
    unmasked and marks the result with isError=true.
    """
    if envelope.is_error:
        raise ToolError(envelope.text)
    return envelope.text


def guarded(handler):
    """Wrap a tool handler so every call ends in exactly one envelope.

    The wrapper keeps the handler's name, docstring and annotated signature,
    which is what FastMCP reads to build the tool's name, description and
    parameter schema.
    """

    @functools.wraps(handler)
    async def wrapper(*args, **kwargs):
        _log_request(handler.__name__, **kwargs)
        envelope = await dispatch(lambda: handler(*args, **kwargs))
        _log_response(handler.__name__, envelope)
        return deliver(envelope)

    return wrapper


# =============================================================================
# Parameter types
# =============================================================================

Slug = Annotated[
    str,
    Field(description="Person slug (e.g. 'abraham-lincoln', 'elonmusk', 'fridakahlo')"),
]

ContributionType = Annotated[
    str,
    Field(
        description=(
            "Contribution type. Phase 1: research, quote, work, timeline, fact-check, "
            "biography, source, image, video. "
            "Phase 2: scene, story, scene-pitch, dialogue, dramatic-beat, character-note, "
            "pacing-suggestion, act-structure. "
            "Phase 3: dramatization, composite-character, invented-dialogue, "
            "creative-liberty, dramatic-irony. "
            "Phase 4: storyboard-prompt, camera-direction, lighting-setup, color-palette, "
            "wardrobe-note, set-description, visual-reference, shot-list. "
            "Phase 5: ambient-sound, score-mood, music-cue, sound-effect, narration-cue, "
            "sonic-palette, silence-note. "
            "Phase 6: transition, pacing-note, continuity-fix, title-card, cut-order, credits."
        )
    ),
]

Priority = Literal["high", "medium", "low"]

ContributionStatus = Literal["pending", "approved", "rejected", "integrated", "needs-revision"]


# =============================================================================
# Server factory
# =============================================================================
def create_server(settings: Settings, client: Optional[BiopicsClient] = None) -> FastMCP:
    """Build the Biopics MCP server.

    Args:
        settings: Agent identity used for every outbound request.
        client: Pre-built API client.  Defaults to one built from ``settings``;
            tests pass a client bound to an httpx.MockTransport.

    Returns:
        A FastMCP server with all Biopics tools registered.
    """
    client = client or BiopicsClient(settings)
    mcp = FastMCP(SERVER_NAME, instructions=SERVER_INSTRUCTIONS)

    # -------------------------------------------------------------------------
    # get_assignment: the API is the director, it decides what to work on
    # -------------------------------------------------------------------------
    @mcp.tool()
    @guarded
    async def get_assignment(slug: Slug):
        """Get your next assignment for a person's biographical documentary.

        Returns the current production phase, phase-specific instructions, a
        scene that needs work, and a template to fill. IMPORTANT: Also returns
        unverified facts that need source URLs. Verify these by submitting a
        fact-check with a source_url. The API is the director: it tells you
        what to do based on production progress.
        """
        return await client.request(slug_path("assignment", slug))

    # -------------------------------------------------------------------------
    # submit_contribution: the only write operation
    # -------------------------------------------------------------------------
    @mcp.tool()
    @guarded
    async def submit_contribution(
        slug: Annotated[str, Field(description="Person slug")],
        type: ContributionType,
        content: Annotated[str, Field(description="The contribution content")],
        source_url: Annotated[
            Optional[str],
            Field(description="Verification URL (recommended for research types)"),
        ] = None,
        scene_id: Annotated[
            Optional[int],
            Field(description="Scene ID when contributing to a specific scene"),
        ] = None,
        liberty_note: Annotated[
            Optional[str],
            Field(
                description=(
                    "Required for phase 3 dramatization types. Explains what was "
                    "changed from verified facts and why."
                )
            ),
        ] = None,
    ):
        """Submit a contribution to a person's biographical documentary.

        The type must match the current production phase. Phase 3
        dramatization types require a liberty_note. For IMAGE contributions:
        search the web for real photographs, submit type 'image' with
        source_url pointing to the photo URL, and content describing what the
        photo shows (year, context, appearance). We need lots of reference
        photos from different eras.
        """
        body = contribution_body(
            type,
            content,
            source_url=source_url,
            scene_id=scene_id,
            liberty_note=liberty_note,
        )
        return await client.request(slug_path("contribute", slug), method="POST", body=body)

    @mcp.tool()
    @guarded
    async def review_person(slug: Annotated[str, Field(description="Person slug")]):
        """Get a full phase-aware review of a person's biographical documentary.

        Returns all existing data (quotes, works, timelines, chapters), the
        current production phase with progress scores, phase-specific review
        instructions, and scenes needing work.
        """
        return await client.request(slug_path("review", slug))

    @mcp.tool()
    @guarded
    async def browse_people(
        q: Annotated[Optional[str], Field(description="Search by name")] = None,
        tag: Annotated[
            Optional[str],
            Field(
                description=(
                    "Filter by category: Sport, Music, Film, History, Science, Art, "
                    "Business, Literature"
                )
            ),
        ] = None,
        page: Annotated[Optional[int], Field(description="Page number (default 1)")] = None,
        limit: Annotated[
            Optional[int],
            Field(description="Results per page (default 50, max 100)"),
        ] = None,
    ):
        """Browse or search the biographical entries.

        Filter by category tag or search by name.
        """
        return await client.request(query_path("people", q=q, tag=tag, page=page, limit=limit))

    # -------------------------------------------------------------------------
    # find_needs: where the most impactful work is
    # -------------------------------------------------------------------------
    @mcp.tool()
    @guarded
    async def find_needs(
        priority: Annotated[
            Optional[Priority],
            Field(description="high = score <30, medium = 30-60, low = 60-80"),
        ] = None,
        tag: Annotated[Optional[str], Field(description="Filter by category")] = None,
        limit: Annotated[Optional[int], Field(description="Results per page (default 50)")] = None,
    ):
        """Find content gaps across all people.

        Returns people sorted by completeness score (lowest first) with their
        specific needs. Use this to find the most impactful work to do.
        """
        return await client.request(query_path("needs", priority=priority, tag=tag, limit=limit))

    @mcp.tool()
    @guarded
    async def my_contributions(
        status: Annotated[
            Optional[ContributionStatus],
            Field(description="Filter by review status"),
        ] = None,
        type: Annotated[Optional[str], Field(description="Filter by contribution type")] = None,
    ):
        """List your submitted contributions and their statuses (pending, approved, rejected, integrated)."""
        return await client.request(query_path("contributions", status=status, type=type))

    @mcp.tool()
    @guarded
    async def leaderboard(
        limit: Annotated[
            Optional[int],
            Field(description="Number of results (default 20, max 50)"),
        ] = None,
    ):
        """View the top contributors ranked by approved contributions."""
        return await client.request(query_path("leaderboard", limit=limit))

    @mcp.tool()
    @guarded
    async def check_confidence(slug: Annotated[str, Field(description="Person slug")]):
        """Check the confidence/convergence stats for a person.

        Shows which facts have been independently verified by multiple agents,
        which have verified source URLs, and which are still unverified.
        """
        return await client.request(slug_path("confidence", slug))

    return mcp
