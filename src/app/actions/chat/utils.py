from typing import Any, Dict

from ...errors import PerplexityResponseError


def format_chat_completion(data: Dict[str, Any]) -> str:
    """Return choices[0].message.content, with a numbered citation list appended when present."""
    try:
        message_content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise PerplexityResponseError(
            "Unexpected response format from Perplexity API: missing choices[0].message.content"
        ) from e
    if not isinstance(message_content, str):
        raise PerplexityResponseError(
            "Unexpected response format from Perplexity API: message content is not a string"
        )

    citations = data.get("citations")
    if isinstance(citations, list) and len(citations) > 0:
        message_content += "\n\nCitations:\n"
        for index, citation in enumerate(citations, start=1):
            message_content += f"[{index}] {citation}\n"

    return message_content
