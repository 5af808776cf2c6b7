import asyncio
import os

import httpx

TEST_API_KEY = "pplx-test-key"
CHAT_URL = "https://api.perplexity.ai/chat/completions"
SEARCH_URL = "https://api.perplexity.ai/search"

def setup_test_environment():
    """
    This function must be called before importing any application code
    so that Settings() can be built without a real credential.
    """
    os.environ["PERPLEXITY_API_KEY"] = TEST_API_KEY
    os.environ.pop("PERPLEXITY_TIMEOUT_MS", None)
    os.environ.pop("PERPLEXITY_BASE_URL", None)
    os.environ.pop("PORT", None)

def make_settings(**overrides):
    from app.config import Settings

    values = {"PERPLEXITY_API_KEY": TEST_API_KEY}
    values.update(overrides)
    return Settings(**values)

def chat_response(content: str = "Paris", citations=None) -> dict:
    data = {
        "id": "chatcmpl-123",
        "model": "sonar-pro",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}],
    }
    if citations is not None:
        data["citations"] = citations
    return data

class SlowTransport(httpx.AsyncBaseTransport):
    """Transport that never answers before `delay` seconds."""

    def __init__(self, delay: float = 5.0):
        self.delay = delay
        self.cancelled = False

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        try:
            await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        return httpx.Response(200, json={})
