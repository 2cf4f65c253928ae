"""
FastAPI application factory for the transcription gateway.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, HTTPException, status as http_status  # type: ignore
from fastapi.middleware.cors import CORSMiddleware  # type: ignore
from fastapi.responses import JSONResponse  # type: ignore
from fastapi.exceptions import RequestValidationError  # type: ignore

from core.config import get_settings
from core.container import bootstrap_container
from core.logger import logger
from infrastructure.http.provider_client import close_transcription_provider
from internal.api.routes.health_routes import create_health_routes
from internal.api.routes.transcribe_routes import router as transcribe_router
from internal.api.utils import error_response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan - startup and shutdown.

    The provider is not contacted at startup; an unreachable provider is a
    normal operating mode (fallback), not a startup failure.
    """
    settings = get_settings()
    logger.info(
        f"========== Starting {settings.app_name} v{settings.app_version} API service =========="
    )
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"API: {settings.api_host}:{settings.api_port}")
    logger.info(f"Provider: {settings.aws_api_url} (timeout={settings.provider_timeout_seconds}s)")

    bootstrap_container()
    logger.info("DI Container initialized")

    logger.info(f"========== {settings.app_name} API service started successfully ==========")

    yield

    logger.info("========== Shutting down API service ==========")
    await close_transcription_provider()
    logger.info("========== API service stopped successfully ==========")


def create_app() -> FastAPI:
    """
    Factory function to create and configure the FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()

    description = """
## Anna Logica Transcription Gateway

Accepts an audio/video upload and forwards it to the AWS Lambda
transcription provider.

### Processing Flow

1. **Request** - multipart POST to `/api/transcribe` (`file`, `language`)
2. **Normalize** - file is base64-encoded; without a file the demo path is used
3. **Provider** - one POST to `{AWS_API_URL}/transcribe`
4. **Response** - provider result, enterprise fallback, or backup narrative

Transcription endpoints always answer HTTP 200; check `success` in the body.
    """

    tags_metadata = [
        {
            "name": "Transcription",
            "description": "Upload transcription and provider health.",
        },
        {
            "name": "Health",
            "description": "Health check endpoints for monitoring API status.",
        },
    ]

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description=description,
        lifespan=lifespan,
        openapi_tags=tags_metadata,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(transcribe_router)  # /api/transcribe
    app.include_router(create_health_routes())  # / and /health

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle validation errors - return 422 with errors field."""
        errors_dict = {}
        for e in exc.errors():
            field = e["loc"][-1] if e["loc"] else "unknown"
            errors_dict[str(field)] = e["msg"]

        error_msg = "; ".join([f"{k}: {v}" for k, v in errors_dict.items()])
        logger.error(f"Validation error: {error_msg}")

        return JSONResponse(
            status_code=http_status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=error_response(
                message="Validation error",
                error_code=1,
                errors=errors_dict,
            ),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Handle HTTP exceptions with unified format."""
        logger.error(f"HTTP error: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(
                message=str(exc.detail),
                error_code=1,
                errors={"detail": exc.detail},
            ),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle all other exceptions with unified format."""
        logger.error(f"Unhandled exception: {str(exc)}")
        logger.exception("Exception details:")
        return JSONResponse(
            status_code=http_status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_response(
                message="Internal server error",
                error_code=1,
                errors={"detail": str(exc)},
            ),
        )

    return app
