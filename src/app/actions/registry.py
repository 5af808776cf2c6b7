from typing import Any, Dict, cast

from ..errors import UnknownToolError
from ..perplexity import PerplexityClient
from .catalog import PERPLEXITY_ASK, PERPLEXITY_REASON, PERPLEXITY_RESEARCH, PERPLEXITY_SEARCH
from .models import ToolHandler


def validate_handler(handler: Any) -> ToolHandler:
    if not callable(handler):
        raise TypeError(f"Handler must be callable: {handler}")
    return cast(ToolHandler, handler)


def get_tool_registry() -> Dict[str, ToolHandler]:
    from .chat import ask_handler, reason_handler, research_handler
    from .search import search_handler

    registry = {
        PERPLEXITY_ASK: validate_handler(ask_handler),
        PERPLEXITY_RESEARCH: validate_handler(research_handler),
        PERPLEXITY_REASON: validate_handler(reason_handler),
        PERPLEXITY_SEARCH: validate_handler(search_handler),
    }

    return registry


async def invoke_tool(client: PerplexityClient, name: str, arguments: Dict[str, Any]) -> str:
    """
    Run the tool called `name` and return its text result.

    Arguments are validated by the handler before any request goes upstream.

    Raises:
        UnknownToolError: no tool has that name.
        ToolValidationError: the arguments are invalid for the tool.
        PerplexityError: the upstream call failed.
    """
    tool_name = name.strip()
    handler = get_tool_registry().get(tool_name)
    if handler is None:
        raise UnknownToolError(tool_name)
    return await handler(client, arguments)
