# =============================================================================
# core/config.py  -  Agent identity and connection settings
# =============================================================================
#
# Three environment variables identify the calling agent to the remote API:
#
#   BIOPICS_AGENT       -> agent name (default "mcp-agent")
#   BIOPICS_MODEL       -> AI model name, sent as X-Model (default: not sent)
#   BIOPICS_USER_TOKEN  -> studio JWT for user-aware responses (default: none,
#                          requests are identified by agent name only)
#
# The values are read ONCE, at startup, into a frozen Settings object that is
# handed to the client and the server factory.  Nothing below main.py reads
# os.environ directly.
# =============================================================================

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

API_BASE = "https://api.biopics.ai"
DEFAULT_AGENT_NAME = "mcp-agent"


@dataclass(frozen=True)
class Settings:
    """Process-wide identity context for outbound API calls."""

    agent_name: str = DEFAULT_AGENT_NAME
    model_name: str = ""
    user_token: str = field(default="", repr=False)  # never shows up in logs
    api_base: str = API_BASE

    # None disables the HTTP timeout entirely: a hung call hangs the tool call.
    timeout: Optional[float] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from the environment (or an explicit mapping).

        Empty values fall back to the defaults, so ``BIOPICS_AGENT=""`` still
        yields the default agent name.
        """
        env = os.environ if environ is None else environ
        return cls(
            agent_name=env.get("BIOPICS_AGENT") or DEFAULT_AGENT_NAME,
            model_name=env.get("BIOPICS_MODEL") or "",
            user_token=env.get("BIOPICS_USER_TOKEN") or "",
        )

    @property
    def has_token(self) -> bool:
        return bool(self.user_token)
