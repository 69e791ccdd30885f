"""Unit tests for the OpenAIEmbeddingProvider."""

import json

import httpx
import pytest

from docsearch.domain.exceptions import EmbeddingUnavailableError
from docsearch.infrastructure.openai import OpenAIEmbeddingProvider


# ── Helpers ──


def _mock_embedding_response(vector: list[float], model: str = "text-embedding-3-small") -> dict:
    """Build a mock /embeddings JSON response."""
    return {
        "object": "list",
        "data": [{"object": "embedding", "index": 0, "embedding": vector}],
        "model": model,
        "usage": {"prompt_tokens": 3, "total_tokens": 3},
    }


def _make_recording_transport(
    response_data: dict | None = None,
    status_code: int = 200,
    captured: list[httpx.Request] | None = None,
) -> httpx.MockTransport:
    """Create a mock transport that records requests and returns a fixed response."""

    def handler(request: httpx.Request) -> httpx.Response:
        if captured is not None:
            captured.append(request)
        return httpx.Response(status_code, json=response_data or {})

    return httpx.MockTransport(handler)


# ── Tests ──


@pytest.mark.asyncio
async def test_embed_parses_vector():
    captured: list[httpx.Request] = []
    transport = _make_recording_transport(_mock_embedding_response([0.1, -0.2, 0.3]), captured=captured)
    provider = OpenAIEmbeddingProvider(
        api_key="test-key",
        http_client=httpx.AsyncClient(transport=transport),
    )

    vector = await provider.embed("quick fox")

    assert vector == [0.1, -0.2, 0.3]
    request = captured[0]
    assert request.url == "https://api.openai.com/v1/embeddings"
    assert request.headers["Authorization"] == "Bearer test-key"
    body = json.loads(request.content)
    assert body == {"model": "text-embedding-3-small", "input": "quick fox"}


@pytest.mark.asyncio
async def test_embed_sends_dimensions_and_custom_base_url():
    captured: list[httpx.Request] = []
    transport = _make_recording_transport(_mock_embedding_response([1.0, 0.0]), captured=captured)
    provider = OpenAIEmbeddingProvider(
        api_key="test-key",
        base_url="http://localhost:8080/v1/",
        model="custom-embedder",
        dimensions=2,
        http_client=httpx.AsyncClient(transport=transport),
    )

    await provider.embed("hello")

    assert captured[0].url == "http://localhost:8080/v1/embeddings"
    body = json.loads(captured[0].content)
    assert body["model"] == "custom-embedder"
    assert body["dimensions"] == 2


@pytest.mark.asyncio
async def test_embed_without_api_key_fails_before_any_request():
    captured: list[httpx.Request] = []
    transport = _make_recording_transport(_mock_embedding_response([1.0]), captured=captured)
    provider = OpenAIEmbeddingProvider(
        api_key="  ",
        http_client=httpx.AsyncClient(transport=transport),
    )

    with pytest.raises(EmbeddingUnavailableError) as exc_info:
        await provider.embed("hello")

    assert "not configured" in exc_info.value.message
    assert exc_info.value.provider == "openai"
    assert captured == []


@pytest.mark.asyncio
async def test_embed_error_status():
    error_data = {"error": {"message": "Invalid API key", "type": "invalid_request_error"}}
    transport = _make_recording_transport(error_data, status_code=401)
    provider = OpenAIEmbeddingProvider(
        api_key="bad-key",
        http_client=httpx.AsyncClient(transport=transport),
    )

    with pytest.raises(EmbeddingUnavailableError) as exc_info:
        await provider.embed("hello")

    assert exc_info.value.status_code == 401
    assert "Invalid API key" in exc_info.value.message


@pytest.mark.asyncio
async def test_embed_transport_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    provider = OpenAIEmbeddingProvider(
        api_key="test-key",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    with pytest.raises(EmbeddingUnavailableError) as exc_info:
        await provider.embed("hello")

    assert exc_info.value.status_code is None
    assert "ConnectError" in exc_info.value.message


@pytest.mark.asyncio
async def test_embed_malformed_response():
    transport = _make_recording_transport({"data": []})
    provider = OpenAIEmbeddingProvider(
        api_key="test-key",
        http_client=httpx.AsyncClient(transport=transport),
    )

    with pytest.raises(EmbeddingUnavailableError) as exc_info:
        await provider.embed("hello")

    assert "Malformed" in exc_info.value.message
