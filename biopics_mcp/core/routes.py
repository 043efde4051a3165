# =============================================================================
# core/routes.py  -  Request builders for the Biopics API
# =============================================================================
#
# Pure functions: no I/O, no settings.  They turn tool arguments into the
# relative path (and body) the client sends.
#
# OPTIONAL ARGUMENTS ARE PRESENCE-BASED:
#   An optional argument counts as "supplied" when it is not None and not the
#   empty string.  Zero is a real value: scene_id=0 and limit=0 are sent.
#   Omitted arguments are never sent as empty strings or defaults.
# =============================================================================

from typing import Any, Dict, Optional
from urllib.parse import quote, urlencode


def is_supplied(value: Any) -> bool:
    return value is not None and value != ""


def slug_path(resource: str, slug: str) -> str:
    """``/<resource>/<slug>`` with the slug percent-encoded as one segment.

    Slug format itself is validated by the remote service.
    """
    return f"/{resource}/{quote(slug, safe='')}"


def query_path(resource: str, **params: Any) -> str:
    """``/<resource>`` plus a query string built from the supplied params.

    Keys keep the order they were passed in.  No "?" at all when nothing
    was supplied.
    """
    supplied = {key: value for key, value in params.items() if is_supplied(value)}
    if not supplied:
        return f"/{resource}"
    return f"/{resource}?{urlencode(supplied)}"


def contribution_body(
    type: str,
    content: str,
    source_url: Optional[str] = None,
    scene_id: Optional[int] = None,
    liberty_note: Optional[str] = None,
) -> Dict[str, Any]:
    """JSON body for POST /contribute/{slug}.

    ``type`` and ``content`` are always present; the rest only when supplied.
    """
    body: Dict[str, Any] = {"type": type, "content": content}
    optional = {"source_url": source_url, "scene_id": scene_id, "liberty_note": liberty_note}
    body.update((key, value) for key, value in optional.items() if is_supplied(value))
    return body
