import inspect
import json
from typing import Any, Callable, List

import httpx
import pytest

from biopics_mcp.core.client import BiopicsClient
from biopics_mcp.core.config import Settings
from biopics_mcp.tools.mcp_server import create_server


class FakeApi:
    """Stand-in for api.biopics.ai built on httpx.MockTransport.

    Records every request it receives and answers with ``responder``, which
    may be a plain function or a coroutine function of the request.
    """

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.responder: Callable[[httpx.Request], Any] = lambda request: httpx.Response(
            200, json={"ok": True}
        )

    def respond(self, status: int = 200, json: Any = None, text: str = None) -> None:
        if text is not None:
            self.responder = lambda request: httpx.Response(status, text=text)
        else:
            self.responder = lambda request: httpx.Response(status, json=json)

    async def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responder(request)
        if inspect.isawaitable(response):
            response = await response
        return response

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_body(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def settings() -> Settings:
    return Settings(agent_name="test-agent")


@pytest.fixture
def token_settings() -> Settings:
    return Settings(agent_name="test-agent", model_name="test-model", user_token="jwt-123")


@pytest.fixture
def client(settings: Settings, api: FakeApi) -> BiopicsClient:
    return BiopicsClient(settings, transport=api.transport)


@pytest.fixture
def server(settings: Settings, client: BiopicsClient):
    return create_server(settings, client)


@pytest.fixture
def token_server(token_settings: Settings, api: FakeApi):
    return create_server(token_settings, BiopicsClient(token_settings, transport=api.transport))
