from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager

from .api import router as api_router
from .api.response.response import error, unexpect_error
from .logger import log
from .middleware import apply_cors
from .config import get_settings

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Refuse to serve without a credential
    settings = get_settings()
    log.info("Perplexity gateway started", extra={"timeout_ms": settings.PERPLEXITY_TIMEOUT_MS})
    yield
    log.info("Perplexity gateway shutting down")

app = FastAPI(lifespan=lifespan, docs_url=None, redoc_url=None, openapi_url=None, redirect_slashes=False)

app.middleware("http")(apply_cors)

app.include_router(api_router)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unknown routes and unsupported methods are both "Not found"
    if exc.status_code in (404, 405):
        return error("Not found", status_code=404)
    log.warning(f"HTTPException: {exc.detail}", extra={"status_code": exc.status_code, "path": request.url.path})
    return error(str(exc.detail), status_code=exc.status_code)


# Custom global error handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Handle all uncaught exceptions globally.
    """
    log.error(f"Unhandled error while processing request: {exc}", exc_info=exc)
    return unexpect_error()
