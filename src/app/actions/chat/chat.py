from typing import Any, Dict

from ...logger import log
from ...perplexity import PerplexityClient
from ..catalog import PERPLEXITY_ASK, PERPLEXITY_REASON, PERPLEXITY_RESEARCH
from ..validation import validate_chat_arguments
from .utils import format_chat_completion


async def perform_chat_completion(client: PerplexityClient, tool_name: str, arguments: Dict[str, Any]) -> str:
    """
    Validate the conversation, send it to the model mapped to `tool_name` and
    return the answer text with citations appended.
    """
    params = validate_chat_arguments(tool_name, arguments)
    log.info("Calling Perplexity chat completions", extra={"tool": tool_name, "model": params.model, "message_count": len(params.messages)})
    data = await client.chat_completion(params.messages, params.model)
    return format_chat_completion(data)


async def ask_handler(client: PerplexityClient, arguments: Dict[str, Any]) -> str:
    return await perform_chat_completion(client, PERPLEXITY_ASK, arguments)


async def research_handler(client: PerplexityClient, arguments: Dict[str, Any]) -> str:
    return await perform_chat_completion(client, PERPLEXITY_RESEARCH, arguments)


async def reason_handler(client: PerplexityClient, arguments: Dict[str, Any]) -> str:
    return await perform_chat_completion(client, PERPLEXITY_REASON, arguments)
