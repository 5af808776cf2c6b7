from typing import Any, Dict, List, Literal, Optional, Protocol

from pydantic import BaseModel, ConfigDict, Field

from ..perplexity import PerplexityClient

class ToolDefinition(BaseModel):
    """A tool advertised on GET /tools."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str
    input_schema: Dict[str, Any] = Field(..., alias="inputSchema")

class ToolCallRequest(BaseModel):
    name: str
    arguments: Dict[str, Any] = Field(default_factory=dict)

class ChatCompletionParameters(BaseModel):
    model: str
    # Forwarded as-is; order is conversation history.
    messages: List[Any]

DEFAULT_MAX_RESULTS = 10
MIN_MAX_RESULTS = 1
MAX_MAX_RESULTS = 20

DEFAULT_MAX_TOKENS_PER_PAGE = 1024
MIN_MAX_TOKENS_PER_PAGE = 256
MAX_MAX_TOKENS_PER_PAGE = 2048

class SearchParameters(BaseModel):
    model_config = ConfigDict(frozen=True)

    query: str = Field(..., min_length=1)
    max_results: int = Field(default=DEFAULT_MAX_RESULTS, ge=MIN_MAX_RESULTS, le=MAX_MAX_RESULTS)
    max_tokens_per_page: int = Field(
        default=DEFAULT_MAX_TOKENS_PER_PAGE, ge=MIN_MAX_TOKENS_PER_PAGE, le=MAX_MAX_TOKENS_PER_PAGE
    )
    country: Optional[str] = Field(default=None, description="ISO 3166-1 alpha-2 country code, e.g. 'US'.")

class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str

class ToolResult(BaseModel):
    content: List[TextContent]
    is_error: bool = Field(default=False, serialization_alias="isError")

    @classmethod
    def success(cls, text: str) -> "ToolResult":
        return cls(content=[TextContent(text=text)], is_error=False)

    @classmethod
    def failure(cls, message: str) -> "ToolResult":
        return cls(content=[TextContent(text=f"Error: {message}")], is_error=True)

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)

class ToolHandler(Protocol):
    async def __call__(self, client: PerplexityClient, arguments: Dict[str, Any]) -> str:
        ...
