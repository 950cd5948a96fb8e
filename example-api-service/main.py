"""Example API Service - FastAPI Application Entry Point

A small FastAPI service exposing a single ``example`` resource whose
create endpoint runs an explicit, per-field validation pipeline.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.routers import example
from app.utils.errors import MalformedInputError, RequestValidationFailed
from config import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S",
)
logger = logging.getLogger("example_api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    logger.info(
        f"Starting Example API Service (environment={settings.environment}, "
        f"port={settings.port}, log_level={settings.log_level})"
    )

    yield

    logger.info("Shutting down Example API Service")


app = FastAPI(
    title="Example API Service",
    description="Request validation and routing for a single example resource",
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "X-Request-ID"],
)

app.include_router(example.router)


@app.get("/")
async def root():
    """Root endpoint - basic service status."""
    return {"service": "example-api", "status": "running"}


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring and load balancer probes."""
    return {
        "status": "healthy",
        "version": __version__,
        "environment": settings.environment,
    }


@app.exception_handler(MalformedInputError)
async def malformed_input_handler(request: Request, exc: MalformedInputError):
    """Body could not be bound; report once, without field detail."""
    logger.warning(
        f"Malformed request body on {request.url.path}: {exc.reason}",
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=exc.to_response(),
    )


@app.exception_handler(RequestValidationFailed)
async def validation_failed_handler(
    request: Request, exc: RequestValidationFailed
):
    """Aggregated field-level validation failures."""
    logger.info(
        f"Validation failed on {request.url.path}",
        extra={"fields": exc.fields},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=exc.to_response(),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
):
    """Framework-level parameter errors (e.g. a non-integer id)."""
    logger.warning(
        f"Invalid request parameters on {request.url.path}: {exc.errors()}",
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "title": "Bad request",
            "status": 400,
            "detail": "Request parameters could not be parsed.",
        },
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors.

    Logs the error and returns a user-friendly message.
    Never exposes internal error details to clients.
    """
    logger.error(
        f"Unhandled exception: {type(exc).__name__}",
        extra={
            "path": request.url.path,
            "method": request.method,
        },
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "internal_error",
            "message": "An unexpected error occurred. Please try again.",
        },
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=settings.port)
