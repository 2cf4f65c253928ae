"""
Transcription Gateway - Orchestrates normalization, provider call and fallback.

The gateway never raises to its caller: every outcome, including unexpected
exceptions, is turned into a GatewayResponse.
"""

from datetime import datetime, timezone
from typing import Optional

from core.constants import HEALTH_STATUS, SERVICE_NAME, ProviderReachability
from core.logger import format_exception_short, logger
from core.messages import ErrorMessages, LogMessages
from interfaces.transcription_provider import ITranscriptionProvider
from models.schemas import GatewayResponse, HealthReport, InboundRequest
from services.fallback import backup_response, map_provider_result
from services.normalizer import normalize_request, resolve_language


def iso_timestamp(now: Optional[datetime] = None) -> str:
    """UTC timestamp with millisecond precision and a trailing Z."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


def reachability_for(status_code: Optional[int]) -> ProviderReachability:
    if status_code is None:
        return ProviderReachability.FALLBACK_MODE
    if 200 <= status_code < 300:
        return ProviderReachability.CONNECTED
    return ProviderReachability.DISCONNECTED


class TranscriptionGateway:
    """
    Stateless gateway between callers and the transcription provider.

    Uses dependency injection through interfaces:
    - ITranscriptionProvider: For delivering requests to the provider
    """

    def __init__(self, provider: Optional[ITranscriptionProvider] = None):
        self.provider = provider or self._get_default_provider()
        logger.info(
            LogMessages.INIT_GATEWAY.format(provider=self.provider.__class__.__name__)
        )

    def _get_default_provider(self) -> ITranscriptionProvider:
        from infrastructure.http.provider_client import get_transcription_provider

        return get_transcription_provider()

    async def transcribe(self, inbound: InboundRequest) -> GatewayResponse:
        """
        Run one transcription request through the pipeline.

        Args:
            inbound: Caller request (file may be absent)

        Returns:
            GatewayResponse; success=False only when the provider could not
            be reached or something unexpected failed
        """
        try:
            language = resolve_language(inbound.language)
            provider_request = normalize_request(inbound)
            result = await self.provider.transcribe(provider_request)
            return map_provider_result(result, language, inbound.file)
        except Exception as e:
            logger.error(
                ErrorMessages.PIPELINE_FAILED.format(error=format_exception_short(e))
            )
            logger.exception("Transcription pipeline error details:")
            return backup_response()

    async def health(self) -> HealthReport:
        """
        Report gateway liveness and provider reachability.

        The gateway always reports itself healthy; only the `aws` field
        reflects the provider.
        """
        try:
            status_code = await self.provider.probe()
        except Exception as e:
            logger.warning(f"Provider probe raised: {format_exception_short(e)}")
            status_code = None

        aws = reachability_for(status_code)
        logger.info(LogMessages.PROVIDER_PROBE_RESULT.format(aws=aws.value))

        return HealthReport(
            status=HEALTH_STATUS,
            service=SERVICE_NAME,
            aws=aws.value,
            timestamp=iso_timestamp(),
        )
