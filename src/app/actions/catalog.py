from typing import List

from .models import ToolDefinition

PERPLEXITY_ASK = "perplexity_ask"
PERPLEXITY_RESEARCH = "perplexity_research"
PERPLEXITY_REASON = "perplexity_reason"
PERPLEXITY_SEARCH = "perplexity_search"


def _messages_schema() -> dict:
    return {
        "type": "object",
        "properties": {
            "messages": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "role": {
                            "type": "string",
                            "description": "Role of the message (e.g., system, user, assistant)",
                        },
                        "content": {
                            "type": "string",
                            "description": "The content of the message",
                        },
                    },
                    "required": ["role", "content"],
                },
                "description": "Array of conversation messages",
            },
        },
        "required": ["messages"],
    }


AVAILABLE_TOOLS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name=PERPLEXITY_ASK,
        description=(
            "Engages in a conversation using the Sonar API. "
            "Accepts an array of messages (each with a role and content) "
            "and returns a ask completion response from the Perplexity model."
        ),
        inputSchema=_messages_schema(),
    ),
    ToolDefinition(
        name=PERPLEXITY_RESEARCH,
        description=(
            "Performs deep research using the Perplexity API. "
            "Accepts an array of messages (each with a role and content) "
            "and returns a comprehensive research response with citations."
        ),
        inputSchema=_messages_schema(),
    ),
    ToolDefinition(
        name=PERPLEXITY_REASON,
        description=(
            "Performs reasoning tasks using the Perplexity API. "
            "Accepts an array of messages (each with a role and content) "
            "and returns a well-reasoned response using the sonar-reasoning-pro model."
        ),
        inputSchema=_messages_schema(),
    ),
    ToolDefinition(
        name=PERPLEXITY_SEARCH,
        description=(
            "Performs web search using the Perplexity Search API. "
            "Returns ranked search results with titles, URLs, snippets, and metadata."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Search query string"},
                "max_results": {
                    "type": "number",
                    "description": "Maximum number of results to return (1-20, default: 10)",
                    "minimum": 1,
                    "maximum": 20,
                },
                "max_tokens_per_page": {
                    "type": "number",
                    "description": "Maximum tokens to extract per webpage (default: 1024)",
                    "minimum": 256,
                    "maximum": 2048,
                },
                "country": {
                    "type": "string",
                    "description": "ISO 3166-1 alpha-2 country code for regional results (e.g., 'US', 'GB')",
                },
            },
            "required": ["query"],
        },
    ),
)


def get_available_tools() -> List[ToolDefinition]:
    return list(AVAILABLE_TOOLS)


def get_tool_names() -> List[str]:
    return [tool.name for tool in AVAILABLE_TOOLS]
