"""
Common API schemas shared across different endpoints.

Service envelope format (root and error handlers):
{
    "error_code": int,      # 0 = success, 1+ = error
    "message": str,         # Human-readable message
    "data": Any,            # Response data (omit if empty)
    "errors": Any           # Validation/error details (omit if none)
}

The transcription endpoints do not use this envelope; they return
GatewayResponse / HealthReport bodies directly.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class StandardResponse(BaseModel):
    """
    Unified API response format for service-level endpoints.

    - error_code: 0 = success, 1+ = error
    - message: Human-readable message
    - data: Response data (omit if empty)
    - errors: Validation/error details (omit if none)
    """

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "error_code": 0,
                    "message": "API service is running",
                    "data": {"service": "Anna Logica Clean", "version": "1.0.0"},
                },
                {
                    "error_code": 1,
                    "message": "Validation error",
                    "errors": {"language": "Input should be a valid string"},
                },
            ]
        }
    )

    error_code: int = Field(default=0, description="0 = success, 1+ = error")
    message: str = Field(..., description="Human-readable message")
    data: Optional[Any] = Field(default=None, description="Response data")
    errors: Optional[Any] = Field(default=None, description="Error details")


class ServiceInfo(BaseModel):
    """Data model for the root endpoint."""

    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
    status: str = Field(default="running", description="Service status")
    provider_url: str = Field(..., description="Configured provider base address")
