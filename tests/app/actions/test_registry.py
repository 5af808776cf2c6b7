import pytest
from unittest.mock import AsyncMock

from app.actions import get_tool_names, invoke_tool
from app.errors import ToolValidationError, UnknownToolError
from app.perplexity import PerplexityClient
from tests.app.test_helpers import chat_response


def make_client() -> AsyncMock:
    client = AsyncMock(spec=PerplexityClient)
    client.chat_completion.return_value = chat_response("answer")
    client.search.return_value = {"results": []}
    return client


def test_registry_covers_catalog():
    assert get_tool_names() == ["perplexity_ask", "perplexity_research", "perplexity_reason", "perplexity_search"]


@pytest.mark.asyncio
@pytest.mark.parametrize("tool_name, model", [
    ("perplexity_ask", "sonar-pro"),
    ("perplexity_research", "sonar-deep-research"),
    ("perplexity_reason", "sonar-reasoning-pro"),
])
async def test_chat_tools_use_their_model(tool_name, model):
    client = make_client()
    messages = [{"role": "user", "content": "What is the capital of France?"}]

    result = await invoke_tool(client, tool_name, {"messages": messages})

    assert result == "answer"
    client.chat_completion.assert_awaited_once_with(messages, model)


@pytest.mark.asyncio
async def test_search_tool_forwards_parameters():
    client = make_client()

    result = await invoke_tool(client, "perplexity_search", {"query": "news", "max_results": 3, "country": "US"})

    assert result == "No search results found."
    client.search.assert_awaited_once_with("news", max_results=3, max_tokens_per_page=1024, country="US")


@pytest.mark.asyncio
async def test_tool_name_is_trimmed():
    client = make_client()

    await invoke_tool(client, "  perplexity_ask\n", {"messages": []})

    client.chat_completion.assert_awaited_once_with([], "sonar-pro")


@pytest.mark.asyncio
async def test_unknown_tool():
    client = make_client()

    with pytest.raises(UnknownToolError) as exc_info:
        await invoke_tool(client, " perplexity_draw ", {})

    assert str(exc_info.value) == "Unknown tool: perplexity_draw"


@pytest.mark.asyncio
async def test_validation_happens_before_upstream_call():
    client = make_client()

    with pytest.raises(ToolValidationError):
        await invoke_tool(client, "perplexity_search", {"query": "q", "max_results": 21})
    with pytest.raises(ToolValidationError):
        await invoke_tool(client, "perplexity_ask", {"messages": "hi"})

    client.search.assert_not_awaited()
    client.chat_completion.assert_not_awaited()
