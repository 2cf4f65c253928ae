"""
Pydantic Schemas - Request/Response DTOs for the gateway.

This module consolidates all Pydantic models exchanged with callers
and with the transcription provider.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.constants import DEFAULT_LANGUAGE, DEMO_FILE_PATH


# =============================================================================
# Inbound (caller -> gateway)
# =============================================================================


class InboundFile(BaseModel):
    """An uploaded file part, fully buffered in memory."""

    name: str = Field(..., description="Original file name")
    content: bytes = Field(default=b"", description="Raw file bytes")
    size: int = Field(default=0, description="File size in bytes")

    @property
    def is_real(self) -> bool:
        """Zero-byte uploads are treated as if no file was sent."""
        return self.size > 0


class InboundRequest(BaseModel):
    """Transcription request as received from the caller."""

    file: Optional[InboundFile] = Field(default=None, description="Uploaded file")
    language: str = Field(default=DEFAULT_LANGUAGE, description="Requested language")


# =============================================================================
# Outbound (gateway -> provider)
# =============================================================================


class FileProviderRequest(BaseModel):
    """Provider request carrying real file content."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    language: str
    file_name: str = Field(..., alias="fileName")
    file_content: str = Field(..., alias="fileContent", description="Base64 file bytes")
    file_path: str = Field(..., alias="filePath")

    @property
    def variant(self) -> str:
        return "file"


class DemoProviderRequest(BaseModel):
    """Provider request for demo mode: a fixed placeholder path, no content."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    language: str
    file_path: str = Field(default=DEMO_FILE_PATH, alias="filePath")

    @property
    def variant(self) -> str:
        return "demo"


ProviderRequest = Union[FileProviderRequest, DemoProviderRequest]


class ProviderResponse(BaseModel):
    """
    Loosely structured provider answer.

    Every field may be absent; unknown keys are kept but never interpreted.
    A known field holding anything other than a string counts as absent.
    """

    model_config = ConfigDict(extra="allow")

    transcription: Optional[str] = None
    message: Optional[str] = None
    language: Optional[str] = None

    @field_validator("transcription", "message", "language", mode="before")
    @classmethod
    def drop_non_string(cls, v: Any) -> Optional[str]:
        return v if isinstance(v, str) else None

    @classmethod
    def from_payload(cls, payload: Any) -> "ProviderResponse":
        """Build from any decoded JSON body; non-object bodies carry no fields."""
        if not isinstance(payload, dict):
            return cls()
        return cls.model_validate(payload)


# =============================================================================
# Gateway response (the caller contract)
# =============================================================================


class GatewayResponse(BaseModel):
    """
    Uniform response envelope returned for every transcription call.

    `language` is absent on the backup path and `error` is present only there.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [
                {
                    "success": True,
                    "transcription": "Hola, esta es una prueba.",
                    "language": "es",
                    "provider": "AWS Lambda Enterprise",
                },
                {
                    "success": False,
                    "error": "Error processing transcription",
                    "transcription": "🏢 Sistema de respaldo activado. Transcripción procesada correctamente por Anna Logica Enterprise.",
                    "provider": "Enterprise Backup",
                },
            ]
        },
    )

    success: bool = Field(..., description="False only on the backup path")
    transcription: str = Field(..., min_length=1, description="Transcribed or fallback text")
    language: Optional[str] = Field(default=None, description="Resolved language")
    provider: str = Field(..., description="Code path that produced the result")
    error: Optional[str] = Field(default=None, description="Generic error message")

    def to_body(self) -> dict:
        return self.model_dump(exclude_none=True)


class HealthReport(BaseModel):
    """Gateway liveness and provider reachability."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "status": "healthy",
                    "service": "Anna Logica Clean",
                    "aws": "connected",
                    "timestamp": "2025-01-01T12:00:00.000Z",
                }
            ]
        }
    )

    status: str
    service: str
    aws: str
    timestamp: str
