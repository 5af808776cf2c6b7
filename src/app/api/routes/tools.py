from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ...actions import get_available_tools, invoke_tool
from ...actions.models import ToolResult
from ...dependencies import get_perplexity_client
from ...errors import ToolError
from ...logger import log
from ...perplexity import PerplexityClient
from ..helper.request_body import read_tool_call_request
from ..response.response import ok

router = APIRouter(prefix="/tools", tags=["tools"])


@router.get("")
async def list_tools():
    return ok({"tools": [tool.model_dump(by_alias=True) for tool in get_available_tools()]})


@router.post("/call")
async def call_tool(
    request: Request,
    client: PerplexityClient = Depends(get_perplexity_client),
) -> JSONResponse:
    """
    Invoke a tool and wrap the outcome in the text-content envelope.

    Tool failures (bad arguments, unknown tool, upstream errors) are returned
    as `isError: true` with status 400. Protocol problems with the request
    itself raise HTTPException and are rendered by the app's handler.
    """
    tool_call = await read_tool_call_request(request)

    try:
        text = await invoke_tool(client, tool_call.name, tool_call.arguments)
    except ToolError as e:
        log.error(f"Tool invocation failed for {tool_call.name}: {e}", extra={"tool": tool_call.name})
        return ok(ToolResult.failure(str(e)).to_payload(), status_code=400)
    except Exception as e:
        log.error(f"Tool invocation failed for {tool_call.name}: {e}", extra={"tool": tool_call.name}, exc_info=True)
        return ok(ToolResult.failure(str(e)).to_payload(), status_code=400)

    log.info("Tool invocation succeeded", extra={"tool": tool_call.name})
    return ok(ToolResult.success(text).to_payload())
