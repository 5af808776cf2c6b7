from typing import Any, Dict

from ...logger import log
from ...perplexity import PerplexityClient
from ..validation import validate_search_arguments
from .utils import format_search_results


async def search_handler(client: PerplexityClient, arguments: Dict[str, Any]) -> str:
    """
    Run a web search through the Perplexity Search API and return the
    formatted result list.
    """
    params = validate_search_arguments(arguments)
    log.info(
        "Calling Perplexity search",
        extra={
            "tool": "perplexity_search",
            "query_length": len(params.query),
            "max_results": params.max_results,
            "country": params.country,
        },
    )
    data = await client.search(
        params.query,
        max_results=params.max_results,
        max_tokens_per_page=params.max_tokens_per_page,
        country=params.country,
    )
    return format_search_results(data)
