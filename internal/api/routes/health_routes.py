"""
Health Check API Routes.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from core import get_settings
from core.dependencies import get_gateway_dependency
from internal.api.schemas import ServiceInfo, StandardResponse
from internal.api.utils import success_response
from models.schemas import HealthReport
from services.gateway import TranscriptionGateway


def create_health_routes() -> APIRouter:
    """
    Factory function to create health routes.

    Returns:
        APIRouter: Configured router with root and health endpoints
    """
    router = APIRouter(tags=["Health"])

    @router.get(
        "/",
        response_model=StandardResponse,
        summary="Root Endpoint",
        description="Get basic API information",
        operation_id="get_root",
    )
    async def root():
        """
        Root endpoint.

        Returns service name, version, status and the configured provider
        base address.
        """
        settings = get_settings()
        info = ServiceInfo(
            service=settings.app_name,
            version=settings.app_version,
            provider_url=settings.aws_api_url,
        )
        return success_response(message="API service is running", data=info.model_dump())

    @router.get(
        "/health",
        response_model=HealthReport,
        summary="Health Check",
        description="Same report as GET /api/transcribe, for orchestrator probes",
        operation_id="health_check",
    )
    async def health_check(
        gateway: TranscriptionGateway = Depends(get_gateway_dependency),
    ):
        """
        Health check endpoint.

        **Returns:**
        - status: always "healthy"
        - aws: "connected", "disconnected" or "fallback mode"
        - timestamp: ISO-8601 probe time
        """
        report = await gateway.health()
        return JSONResponse(status_code=200, content=report.model_dump())

    return router
