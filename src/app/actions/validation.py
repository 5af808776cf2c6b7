"""
Argument checks for each tool.

All "is this a string / number / array" decisions live here. Each function
takes the raw `arguments` mapping from the request body and returns a typed
parameter record, or raises ToolValidationError naming the tool and field.
"""
from typing import Any, Dict

from ..errors import ToolValidationError
from .catalog import PERPLEXITY_ASK, PERPLEXITY_REASON, PERPLEXITY_RESEARCH, PERPLEXITY_SEARCH
from .models import (
    DEFAULT_MAX_RESULTS,
    DEFAULT_MAX_TOKENS_PER_PAGE,
    MAX_MAX_RESULTS,
    MAX_MAX_TOKENS_PER_PAGE,
    MIN_MAX_RESULTS,
    MIN_MAX_TOKENS_PER_PAGE,
    ChatCompletionParameters,
    SearchParameters,
)

CHAT_TOOL_MODELS: Dict[str, str] = {
    PERPLEXITY_ASK: "sonar-pro",
    PERPLEXITY_RESEARCH: "sonar-deep-research",
    PERPLEXITY_REASON: "sonar-reasoning-pro",
}


def model_for_tool(tool_name: str) -> str:
    """Upstream model id for a conversational tool."""
    return CHAT_TOOL_MODELS[tool_name]


def validate_chat_arguments(tool_name: str, arguments: Dict[str, Any]) -> ChatCompletionParameters:
    messages = arguments.get("messages")
    if not isinstance(messages, list):
        raise ToolValidationError(tool_name, "'messages' must be an array")
    return ChatCompletionParameters(model=model_for_tool(tool_name), messages=messages)


def _is_number(value: Any) -> bool:
    # bool is an int subclass but not a JSON number
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _bounded_int(arguments: Dict[str, Any], field: str, default: int, low: int, high: int) -> int:
    value = arguments.get(field)
    if not _is_number(value):
        return default
    if not low <= value <= high:
        raise ToolValidationError(PERPLEXITY_SEARCH, f"'{field}' must be between {low} and {high}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ToolValidationError(PERPLEXITY_SEARCH, f"'{field}' must be an integer")
        value = int(value)
    return value


def validate_search_arguments(arguments: Dict[str, Any]) -> SearchParameters:
    query = arguments.get("query")
    if not isinstance(query, str) or not query.strip():
        raise ToolValidationError(PERPLEXITY_SEARCH, "'query' must be a non-empty string")

    max_results = _bounded_int(
        arguments, "max_results", DEFAULT_MAX_RESULTS, MIN_MAX_RESULTS, MAX_MAX_RESULTS
    )
    max_tokens_per_page = _bounded_int(
        arguments,
        "max_tokens_per_page",
        DEFAULT_MAX_TOKENS_PER_PAGE,
        MIN_MAX_TOKENS_PER_PAGE,
        MAX_MAX_TOKENS_PER_PAGE,
    )
    country = arguments.get("country")

    return SearchParameters(
        query=query,
        max_results=max_results,
        max_tokens_per_page=max_tokens_per_page,
        country=country if isinstance(country, str) and country else None,
    )
