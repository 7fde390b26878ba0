"""FastAPI application setup for the weather lookup service."""

import time

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import router as api_router
from .config import settings
from utils.logging_utils import get_tagged_logger, setup_logging

setup_logging(level=settings.log_level, job_name=settings.job_name)
logger = get_tagged_logger(__name__, tag="weather_app/main")

MAX_LOG_LINE = 80

app = FastAPI(title="Weather Lookup")


@app.middleware("http")
async def log_api_requests(request: Request, call_next):
    """Log one line per /api request with status and duration."""
    start = time.perf_counter()
    response = await call_next(request)
    path = request.url.path
    if path.startswith("/api"):
        duration_ms = int((time.perf_counter() - start) * 1000)
        line = f"{request.method} {path} {response.status_code} in {duration_ms}ms"
        if len(line) > MAX_LOG_LINE:
            line = line[:MAX_LOG_LINE - 1] + "…"
        logger.info(line)
    return response


@app.exception_handler(StarletteHTTPException)
async def render_http_error(_request: Request, exc: StarletteHTTPException):
    """Render every HTTP error as ``{"message": ...}``."""
    return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)}, headers=exc.headers)


# API routes
app.include_router(api_router, prefix="/api")
