"""OpenAI-compatible embedding provider — calls the /embeddings endpoint.

Works against api.openai.com and any service exposing the same API
(OpenRouter, Azure-style proxies, local servers).
Default model: text-embedding-3-small (1536 dimensions).
"""

import logging
from typing import Any

import httpx

from docsearch.application.interfaces.embedding_provider import EmbeddingProvider
from docsearch.domain.exceptions import EmbeddingUnavailableError

logger = logging.getLogger(__name__)


class OpenAIEmbeddingProvider(EmbeddingProvider):
    """Infrastructure adapter — embeds query text via an OpenAI-style /embeddings API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.openai.com/v1",
        model: str = "text-embedding-3-small",
        dimensions: int | None = None,
        timeout: float = 60.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._model = model
        self._dimensions = dimensions
        self._timeout = timeout
        self._http_client = http_client

    @property
    def provider_name(self) -> str:
        return "openai"

    def _get_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def embed(self, text: str) -> list[float]:
        """Generate the embedding for a single text.

        Raises:
            EmbeddingUnavailableError: Missing API key, non-200 response,
                transport failure, or a response without an embedding.
        """
        if not self._api_key.strip():
            raise EmbeddingUnavailableError(self.provider_name, "Embedding API key not configured")

        url = f"{self._base_url}/embeddings"
        payload: dict[str, Any] = {
            "model": self._model,
            "input": text,
        }
        if self._dimensions:
            payload["dimensions"] = self._dimensions

        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.post(url, headers=self._get_headers(), json=payload)
        except httpx.HTTPError as exc:
            logger.error("Embedding request failed: %s", exc)
            raise EmbeddingUnavailableError(
                self.provider_name, f"Request failed: {type(exc).__name__}: {exc}"
            ) from exc
        finally:
            if should_close:
                await client.aclose()

        if response.status_code != 200:
            error_text = response.text[:500]
            logger.error("Embedding API error %d: %s", response.status_code, error_text)
            raise EmbeddingUnavailableError(
                self.provider_name, error_text or "Embedding request failed", response.status_code
            )

        try:
            data = response.json()
            vector = [float(v) for v in data["data"][0]["embedding"]]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            raise EmbeddingUnavailableError(
                self.provider_name, "Malformed embedding response"
            ) from exc

        logger.info("Generated query embedding (model=%s, dims=%d)", self._model, len(vector))
        return vector
