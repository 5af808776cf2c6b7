import time
from datetime import datetime, timezone

from fastapi import APIRouter

from ...actions import get_tool_names
from ..response.response import ok

SERVICE_NAME = "perplexity-mcp"
SERVICE_MODE = "http"

_started_monotonic = time.monotonic()
SERVER_START_TIME = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

router = APIRouter(tags=["info"])


@router.get("/")
async def root():
    return ok({
        "service": SERVICE_NAME,
        "mode": SERVICE_MODE,
        "tools": get_tool_names(),
    })


@router.get("/health")
async def health():
    return ok({
        "status": "ok",
        "uptimeSeconds": time.monotonic() - _started_monotonic,
        "startTime": SERVER_START_TIME,
    })
