from typing import Any

from fastapi.responses import JSONResponse, Response

JSON_MEDIA_TYPE = "application/json; charset=utf-8"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,POST,OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def ok(data: Any = None, status_code: int = 200) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=data if data is not None else dict(),
        media_type=JSON_MEDIA_TYPE,
        headers=CORS_HEADERS,
    )


def error(message: str = "error", status_code: int = 400) -> JSONResponse:
    return ok(dict(error=message), status_code=status_code)


def unexpect_error() -> JSONResponse:
    return error("Internal server error", status_code=500)


def no_content() -> Response:
    return Response(status_code=204, headers=CORS_HEADERS)
