from fastapi import Request

from .api.response.response import CORS_HEADERS, no_content


async def apply_cors(request: Request, call_next):
    """Answer every preflight with 204 and stamp CORS headers on all other responses."""
    if request.method == "OPTIONS":
        return no_content()

    resp = await call_next(request)
    for header, value in CORS_HEADERS.items():
        resp.headers[header] = value
    return resp
