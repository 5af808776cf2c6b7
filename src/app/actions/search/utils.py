from typing import Any, Dict

from .models import SearchResult

NO_RESULTS_MESSAGE = "No search results found."


def format_search_results(data: Dict[str, Any]) -> str:
    """Formats a Perplexity Search API response into a numbered plain-text list."""
    results = data.get("results") if isinstance(data, dict) else None
    if not isinstance(results, list) or not results:
        return NO_RESULTS_MESSAGE

    formatted_results = f"Found {len(results)} search results:\n\n"
    for index, raw in enumerate(results, start=1):
        result = SearchResult.from_raw(raw)
        formatted_results += f"{index}. **{result.title}**\n"
        formatted_results += f"   URL: {result.url}\n"
        if result.snippet:
            formatted_results += f"   {result.snippet}\n"
        if result.date:
            formatted_results += f"   Date: {result.date}\n"
        formatted_results += "\n"

    return formatted_results
