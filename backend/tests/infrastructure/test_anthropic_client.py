"""Resilient Anthropic Client — retry and error-mapping behaviour.

Invariants:
    - 5xx / 529 / connection errors retried up to max_retries
    - Timeouts and 4xx fail immediately
    - Every failure surfaces as LanguageServiceError
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import anthropic
import httpx
import pytest

from cookmate.core.errors import LanguageServiceError
from cookmate.infrastructure.anthropic_client import (
    ResilientAnthropicClient,
    extract_text,
)

_REQUEST = httpx.Request("POST", "https://api.anthropic.com/v1/messages")


def _status_error(cls, status: int):
    return cls(
        f"HTTP {status}", response=httpx.Response(status, request=_REQUEST), body=None,
    )


def _ok_response(text="ok"):
    return SimpleNamespace(
        content=[SimpleNamespace(type="text", text=text)],
        usage=SimpleNamespace(input_tokens=3, output_tokens=1),
    )


@pytest.fixture
def resilient():
    client = ResilientAnthropicClient(
        api_key="sk-ant-test", max_retries=2, base_delay_ms=0, max_delay_ms=0,
    )
    client.client = SimpleNamespace(messages=SimpleNamespace(create=AsyncMock()))
    return client


async def _call(client):
    return await client.create_message(
        model="test-model", max_tokens=16,
        messages=[{"role": "user", "content": "hi"}],
    )


async def test_success_on_first_attempt(resilient):
    resilient.client.messages.create.return_value = _ok_response("hello")
    response = await _call(resilient)
    assert extract_text(response) == "hello"
    assert resilient.client.messages.create.call_count == 1


async def test_server_error_is_retried(resilient):
    resilient.client.messages.create.side_effect = [
        _status_error(anthropic.InternalServerError, 500),
        _ok_response(),
    ]
    await _call(resilient)
    assert resilient.client.messages.create.call_count == 2


async def test_retries_exhausted_raise_language_service_error(resilient):
    resilient.client.messages.create.side_effect = anthropic.APIConnectionError(
        request=_REQUEST,
    )
    with pytest.raises(LanguageServiceError) as exc:
        await _call(resilient)
    assert exc.value.api_error_type == "connection_error"
    assert resilient.client.messages.create.call_count == 3


async def test_timeout_is_not_retried(resilient):
    resilient.client.messages.create.side_effect = anthropic.APITimeoutError(
        request=_REQUEST,
    )
    with pytest.raises(LanguageServiceError) as exc:
        await _call(resilient)
    assert exc.value.api_error_type == "timeout"
    assert resilient.client.messages.create.call_count == 1


async def test_client_error_is_not_retried(resilient):
    resilient.client.messages.create.side_effect = _status_error(
        anthropic.BadRequestError, 400,
    )
    with pytest.raises(LanguageServiceError) as exc:
        await _call(resilient)
    assert exc.value.api_error_type == "client_error"
    assert resilient.client.messages.create.call_count == 1


def test_extract_text_ignores_non_text_blocks():
    response = SimpleNamespace(content=[
        SimpleNamespace(type="thinking", thinking="..."),
        SimpleNamespace(type="text", text="a"),
        SimpleNamespace(type="text", text="b"),
    ])
    assert extract_text(response) == "ab"
