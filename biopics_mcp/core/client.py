# =============================================================================
# core/client.py  -  Authenticated HTTP client for api.biopics.ai
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Performs ONE call to the remote API and returns the parsed JSON body.
#
# IDENTITY:
#   - X-Agent-Name is always sent.
#   - X-Model is sent when a model name is configured.
#   - With a user token, "Authorization: Bearer <token>" identifies the caller
#     and the ?agent= query parameter is NOT added.
#   - Without a token, ?agent=<name> is merged into the query string.
#   Caller-supplied headers are applied last and win over the defaults.
#
# FAILURES:
#   - Non-2xx -> ApiError("API <status>: <body>"), body passed through verbatim.
#   - Connection/DNS/timeout -> the httpx exception, untouched.
#   No retries.  No timeout unless Settings.timeout sets one.
#
# Each call opens its own httpx.AsyncClient.  There is no shared connection
# state between tool invocations, so concurrent calls cannot interfere.
# =============================================================================

import logging
from typing import Any, Dict, Optional
from urllib.parse import urlencode

import httpx

from biopics_mcp.core.config import Settings
from biopics_mcp.core.errors import ApiError

logger = logging.getLogger(__name__)

# First path segment of every endpoint this server talks to.
KNOWN_RESOURCES = frozenset({
    "assignment",
    "contribute",
    "review",
    "people",
    "needs",
    "contributions",
    "leaderboard",
    "confidence",
})

METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})


def resource_of(path: str) -> str:
    """First segment of a relative path: ``/people?tag=x`` -> ``people``."""
    return path.lstrip("/").split("?", 1)[0].split("/", 1)[0]


class BiopicsClient:
    """Thin async wrapper around the Biopics REST API."""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        # Tests inject an httpx.MockTransport here.
        self._transport = transport

    def default_headers(self) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "X-Agent-Name": self.settings.agent_name,
        }
        if self.settings.model_name:
            headers["X-Model"] = self.settings.model_name
        if self.settings.has_token:
            headers["Authorization"] = f"Bearer {self.settings.user_token}"
        return headers

    def url_for(self, path: str) -> str:
        """Absolute URL for ``path``, with ``agent=`` appended when anonymous."""
        url = f"{self.settings.api_base}{path}"
        if self.settings.has_token:
            return url
        separator = "&" if "?" in path else "?"
        return f"{url}{separator}{urlencode({'agent': self.settings.agent_name})}"

    async def request(
        self,
        path: str,
        method: str = "GET",
        body: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Call ``<api_base><path>`` and return the decoded JSON response.

        Raises:
            ValueError: the path does not start with a known resource, or the
                method is not an HTTP verb the API understands.
            ApiError: the API answered with a non-2xx status.
            httpx.HTTPError: the request never got an answer.
        """
        if not path.startswith("/") or resource_of(path) not in KNOWN_RESOURCES:
            raise ValueError(f"Unknown API path: {path!r}")
        method = method.upper()
        if method not in METHODS:
            raise ValueError(f"Unsupported HTTP method: {method!r}")

        logger.debug(f"{method} {path}")
        async with httpx.AsyncClient(
            transport=self._transport,
            timeout=self.settings.timeout,
        ) as client:
            response = await client.request(
                method,
                self.url_for(path),
                headers={**self.default_headers(), **(headers or {})},
                json=body,
            )

        if not response.is_success:
            raise ApiError(response.status_code, response.text)
        return response.json()
