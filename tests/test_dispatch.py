import asyncio

import pytest

from biopics_mcp.core.dispatch import dispatch
from biopics_mcp.core.errors import ApiError
from biopics_mcp.core.models import Envelope, describe_error


def test_success_envelope_is_pretty_json() -> None:
    envelope = Envelope.success({"name": "Frida Kahlo", "tags": ["Art"]})

    assert not envelope.is_error
    assert envelope.text == '{\n  "name": "Frida Kahlo",\n  "tags": [\n    "Art"\n  ]\n}'
    assert envelope.payload() == {"name": "Frida Kahlo", "tags": ["Art"]}


def test_success_envelope_keeps_unicode() -> None:
    assert "Gödel" in Envelope.success({"name": "Kurt Gödel"}).text


def test_failure_envelope() -> None:
    envelope = Envelope.failure(ApiError(500, "boom"))

    assert envelope.is_error
    assert envelope.text == "Error: API 500: boom"
    with pytest.raises(ValueError):
        envelope.payload()


def test_describe_error_falls_back_to_class_name() -> None:
    class ReadTimeout(Exception):
        pass

    assert describe_error(ReadTimeout()) == "ReadTimeout"
    assert describe_error(RuntimeError("nope")) == "nope"


@pytest.mark.asyncio
async def test_dispatch_wraps_result() -> None:
    async def call():
        return [1, 2, 3]

    envelope = await dispatch(call)

    assert envelope == Envelope(text="[\n  1,\n  2,\n  3\n]")


@pytest.mark.asyncio
async def test_dispatch_wraps_any_exception() -> None:
    async def call():
        raise KeyError("slug")

    envelope = await dispatch(call)

    assert envelope.is_error
    assert envelope.text == "Error: 'slug'"


@pytest.mark.asyncio
async def test_dispatch_wraps_errors_raised_while_building_the_call() -> None:
    def call():
        raise ValueError("Unknown API path: '/admin'")

    envelope = await dispatch(call)

    assert envelope.text == "Error: Unknown API path: '/admin'"


@pytest.mark.asyncio
async def test_dispatch_lets_cancellation_through() -> None:
    async def call():
        raise asyncio.CancelledError()

    with pytest.raises(asyncio.CancelledError):
        await dispatch(call)
