# =============================================================================
# core/models.py  -  The response envelope
# =============================================================================
#
# Every tool invocation ends in exactly ONE Envelope:
#
#   success -> the remote JSON value, pretty-printed (indent=2) as text
#   failure -> "Error: <message>", flagged with is_error=True
#
# The remote payload stays opaque.  We never model the Biopics API schema
# here: assignments, reviews, leaderboards etc. are the remote service's
# business and can evolve without a release of this server.
# =============================================================================

import json
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Envelope:
    """Uniform success/error wrapper handed back to the calling agent."""

    text: str
    is_error: bool = False

    @classmethod
    def success(cls, data: Any) -> "Envelope":
        return cls(text=json.dumps(data, indent=2, ensure_ascii=False))

    @classmethod
    def failure(cls, error: BaseException) -> "Envelope":
        return cls(text=f"Error: {describe_error(error)}", is_error=True)

    def payload(self) -> Any:
        """Parse a success envelope back into the JSON value it carries."""
        if self.is_error:
            raise ValueError("error envelopes carry no payload")
        return json.loads(self.text)


def describe_error(error: BaseException) -> str:
    """Human-readable message for an exception.

    Some transport errors (httpx.ReadTimeout, for one) can carry an empty
    message; the exception class name is used then.
    """
    return str(error) or type(error).__name__
