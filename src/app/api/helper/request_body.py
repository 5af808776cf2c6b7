from typing import Any

import json
from fastapi import HTTPException, Request

from ...actions.models import ToolCallRequest
from ...logger import log

MAX_REQUEST_SIZE_BYTES = 512 * 1024


def require_json_content_type(request: Request) -> None:
    content_type = request.headers.get("content-type", "").lower()
    if "application/json" not in content_type:
        raise HTTPException(status_code=415, detail="Content-Type must be application/json")


async def read_json_body(request: Request, limit: int = MAX_REQUEST_SIZE_BYTES) -> Any:
    """
    Read the request body chunk by chunk and decode it as JSON.

    Stops consuming the stream as soon as more than `limit` bytes have
    arrived. An empty (or whitespace-only) body decodes to an empty dict.

    Raises:
        HTTPException: 413 when the body exceeds `limit`, 400 when it cannot
            be read or is not valid JSON.
    """
    raw = bytearray()
    try:
        async for chunk in request.stream():
            raw.extend(chunk)
            if len(raw) > limit:
                log.warning("Request body exceeded size limit", extra={"limit_bytes": limit})
                raise HTTPException(status_code=413, detail="Request body too large")
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=400, detail=f"Failed to read request body: {e}")

    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise HTTPException(status_code=400, detail="Request body must be valid JSON")


def parse_tool_call_request(body: Any) -> ToolCallRequest:
    if not isinstance(body, dict):
        raise HTTPException(status_code=400, detail="Request body must include a non-empty 'name' field")

    name = body.get("name")
    if not isinstance(name, str) or not name.strip():
        raise HTTPException(status_code=400, detail="Request body must include a non-empty 'name' field")

    arguments = body.get("arguments")
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, dict):
        raise HTTPException(status_code=400, detail="Request body 'arguments' must be an object")

    return ToolCallRequest(name=name, arguments=arguments)


async def read_tool_call_request(request: Request) -> ToolCallRequest:
    """Turn a POST /tools/call request into a ToolCallRequest or raise a protocol-level HTTPException."""
    require_json_content_type(request)
    body = await read_json_body(request)
    return parse_tool_call_request(body)
