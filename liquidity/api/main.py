"""FastAPI application for the liquidity engine."""

import os

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from liquidity.api.endpoints import router
from liquidity.errors import LiquidityError

logger = structlog.get_logger()

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("LIQUIDITY_HOST", "0.0.0.0")
PORT = int(os.environ.get("LIQUIDITY_PORT", "8000"))
DEBUG = os.environ.get("LIQUIDITY_DEBUG", "false").lower() in ("true", "1", "yes")

# Maximum request body size (1 MB)
MAX_REQUEST_SIZE = 1024 * 1024

app = FastAPI(
    title="Balancer Pool Liquidity",
    description="USD liquidity valuation for Balancer pools",
    version="0.1.0",
)


@app.middleware("http")
async def limit_request_size(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Reject requests with body larger than MAX_REQUEST_SIZE."""
    content_length = request.headers.get("content-length")
    if content_length and int(content_length) > MAX_REQUEST_SIZE:
        return JSONResponse(status_code=413, content={"detail": "Request too large"})
    return await call_next(request)


@app.exception_handler(LiquidityError)
async def liquidity_error_handler(request: Request, exc: LiquidityError) -> JSONResponse:
    """Report valuation failures as typed 422 responses."""
    logger.warning(
        "liquidity_request_rejected",
        path=request.url.path,
        error=type(exc).__name__,
        detail=str(exc),
    )
    return JSONResponse(
        status_code=422,
        content={"error": type(exc).__name__, "detail": str(exc)},
    )


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok"}


def run() -> None:
    """Run the liquidity API server.

    Configuration via environment variables:
    - LIQUIDITY_HOST: Host to bind to (default: 0.0.0.0)
    - LIQUIDITY_PORT: Port to bind to (default: 8000)
    - LIQUIDITY_DEBUG: Enable debug/reload mode (default: false)
    """
    uvicorn.run(
        "liquidity.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
