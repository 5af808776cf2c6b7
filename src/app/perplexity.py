import asyncio
import json
from typing import Any, Dict, List, Optional

import httpx

from .config import Settings
from .errors import (
    PerplexityAPIError,
    PerplexityNetworkError,
    PerplexityResponseError,
    PerplexityTimeoutError,
)
from .logger import log

CHAT_API_NAME = "Perplexity API"
SEARCH_API_NAME = "Perplexity Search API"
ERROR_BODY_PLACEHOLDER = "Unable to parse error response"


class PerplexityClient:
    """Issues single POST requests to the Perplexity chat-completions and search endpoints."""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self.transport = transport

    @property
    def chat_completions_url(self) -> str:
        return f"{self.settings.PERPLEXITY_BASE_URL.rstrip('/')}/chat/completions"

    @property
    def search_url(self) -> str:
        return f"{self.settings.PERPLEXITY_BASE_URL.rstrip('/')}/search"

    async def chat_completion(self, messages: List[Any], model: str) -> Dict[str, Any]:
        """Request a chat completion. `messages` is forwarded exactly as received."""
        body = {
            "model": model,
            "messages": messages,
        }
        return await self._post(self.chat_completions_url, body, CHAT_API_NAME)

    async def search(
        self,
        query: str,
        max_results: int | float = 10,
        max_tokens_per_page: int | float = 1024,
        country: str | None = None,
    ) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "query": query,
            "max_results": max_results,
            "max_tokens_per_page": max_tokens_per_page,
        }
        if country:
            body["country"] = country
        return await self._post(self.search_url, body, SEARCH_API_NAME)

    async def _post(self, url: str, body: Dict[str, Any], api_name: str) -> Dict[str, Any]:
        """
        POST `body` to `url` and return the decoded JSON response.

        The whole exchange (connect, send, read) runs under one deadline of
        PERPLEXITY_TIMEOUT_MS; when it expires the request task is cancelled.

        Raises:
            PerplexityTimeoutError: the deadline elapsed.
            PerplexityNetworkError: the request could not be sent or read.
            PerplexityAPIError: upstream answered with a non-2xx status.
            PerplexityResponseError: a 2xx body that is not valid JSON.
        """
        timeout_ms = self.settings.PERPLEXITY_TIMEOUT_MS
        try:
            status_code, status_text, content = await asyncio.wait_for(
                self._send(url, body), timeout=self.settings.timeout_seconds
            )
        except (asyncio.TimeoutError, httpx.TimeoutException):
            log.error(f"{api_name} request timed out", extra={"url": url, "timeout_ms": timeout_ms})
            raise PerplexityTimeoutError(api_name, timeout_ms)
        except httpx.RequestError as e:
            log.error(f"{api_name} request failed: {e!r}", extra={"url": url})
            raise PerplexityNetworkError(api_name, e) from e

        if not 200 <= status_code < 300:
            try:
                error_text = content.decode("utf-8")
            except UnicodeDecodeError:
                error_text = ERROR_BODY_PLACEHOLDER
            log.error(f"{api_name} returned non-success status", extra={"url": url, "status_code": status_code})
            raise PerplexityAPIError(api_name, status_code, status_text, error_text)

        try:
            return json.loads(content)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise PerplexityResponseError(f"Failed to parse JSON response from {api_name}: {e}") from e

    async def _send(self, url: str, body: Dict[str, Any]) -> tuple[int, str, bytes]:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.settings.PERPLEXITY_API_KEY}",
        }
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(self.settings.timeout_seconds),
            transport=self.transport,
        ) as client:
            response = await client.post(url, content=json.dumps(body), headers=headers)
            return response.status_code, response.reason_phrase, response.content
