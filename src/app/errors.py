"""
Exceptions raised while running a tool.

Everything derived from ToolError is reported to the caller inside the
``isError: true`` envelope. Protocol problems (content type, body size,
malformed JSON) are raised as HTTPException instead and never reach here.
"""


class ToolError(Exception):
    """Base class for failures that surface as a tool result."""


class ToolValidationError(ToolError):
    """Tool arguments are missing or have the wrong type or range."""

    def __init__(self, tool_name: str, message: str):
        self.tool_name = tool_name
        super().__init__(f"Invalid arguments for {tool_name}: {message}")


class UnknownToolError(ToolError):
    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}")


class PerplexityError(ToolError):
    """Base class for upstream failures."""


class PerplexityTimeoutError(PerplexityError):
    def __init__(self, api_name: str, timeout_ms: int):
        self.timeout_ms = timeout_ms
        super().__init__(
            f"Request timeout: {api_name} did not respond within {timeout_ms}ms. "
            "Consider increasing PERPLEXITY_TIMEOUT_MS."
        )


class PerplexityNetworkError(PerplexityError):
    def __init__(self, api_name: str, cause: Exception):
        self.cause = cause
        super().__init__(f"Network error while calling {api_name}: {type(cause).__name__}: {cause}")


class PerplexityAPIError(PerplexityError):
    def __init__(self, api_name: str, status_code: int, status_text: str, body: str):
        self.status_code = status_code
        self.status_text = status_text
        self.body = body
        super().__init__(f"{api_name} error: {status_code} {status_text}\n{body}")


class PerplexityResponseError(PerplexityError):
    """Upstream answered with a success status but an unusable body."""
