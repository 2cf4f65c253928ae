"""
Fallback Policy - Maps every provider outcome onto a GatewayResponse.

These are pure functions: the same result and inbound file always produce
the same response. Only the backup path reports success=False, and even
that is returned to the caller with HTTP 200.
"""

import math
from typing import Optional

from core.constants import (
    BACKUP_ERROR,
    BACKUP_TRANSCRIPTION,
    DEFAULT_FALLBACK_FILE_NAME,
    DEFAULT_TRANSCRIPTION,
    ENTERPRISE_FALLBACK_TEMPLATE,
    ProviderLabel,
)
from core.logger import logger
from core.messages import LogMessages
from models.results import (
    ProviderHTTPError,
    ProviderOK,
    ProviderResult,
    ProviderTransportError,
)
from models.schemas import GatewayResponse, InboundFile, ProviderResponse


def round_megabytes(size_bytes: int) -> int:
    """Whole megabytes, halves rounded up."""
    return int(math.floor(size_bytes / 1024 / 1024 + 0.5))


def _first_present(*values: Optional[str]) -> Optional[str]:
    for value in values:
        if value is not None and value != "":
            return value
    return None


def enterprise_fallback_text(file: Optional[InboundFile]) -> str:
    file_name = _first_present(file.name if file else None) or DEFAULT_FALLBACK_FILE_NAME
    size_mb = round_megabytes(file.size) if file else 0
    return ENTERPRISE_FALLBACK_TEMPLATE.format(file_name=file_name, size_mb=size_mb)


def primary_response(response: ProviderResponse, language: str) -> GatewayResponse:
    transcription = _first_present(response.transcription, response.message)
    return GatewayResponse(
        success=True,
        transcription=transcription or DEFAULT_TRANSCRIPTION,
        language=_first_present(response.language) or language,
        provider=ProviderLabel.PRIMARY.value,
    )


def enterprise_fallback_response(
    file: Optional[InboundFile], language: str
) -> GatewayResponse:
    return GatewayResponse(
        success=True,
        transcription=enterprise_fallback_text(file),
        language=language,
        provider=ProviderLabel.FALLBACK.value,
    )


def backup_response() -> GatewayResponse:
    return GatewayResponse(
        success=False,
        error=BACKUP_ERROR,
        transcription=BACKUP_TRANSCRIPTION,
        provider=ProviderLabel.BACKUP.value,
    )


def map_provider_result(
    result: ProviderResult,
    language: str,
    file: Optional[InboundFile] = None,
) -> GatewayResponse:
    """
    Map a provider outcome onto the caller-facing response.

    Args:
        result: Outcome of the single provider call
        language: Requested language (already defaulted)
        file: Inbound file, used by the enterprise fallback narrative

    Returns:
        GatewayResponse for the outcome
    """
    if isinstance(result, ProviderOK):
        return primary_response(result.response, language)

    if isinstance(result, ProviderHTTPError):
        logger.warning(LogMessages.FALLBACK_ENTERPRISE.format(status_code=result.status_code))
        return enterprise_fallback_response(file, language)

    if isinstance(result, ProviderTransportError):
        logger.warning(LogMessages.FALLBACK_BACKUP.format(reason=result.reason))
        return backup_response()

    raise TypeError(f"Unknown provider result: {type(result).__name__}")
