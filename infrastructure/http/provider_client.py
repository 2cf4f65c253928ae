"""
HTTP Transcription Provider - Delivers requests to the remote provider.

Implements ITranscriptionProvider interface for dependency injection.
Uses a pooled httpx client with bounded timeouts; every call is attempted
exactly once.
"""

import time
from typing import Optional

import httpx  # type: ignore

from core.config import get_settings
from core.constants import (
    HTTP_KEEPALIVE_EXPIRY,
    HTTP_MAX_KEEPALIVE_CONNECTIONS,
    PROVIDER_TRANSCRIBE_PATH,
)
from core.logger import logger
from core.messages import ErrorMessages, LogMessages
from interfaces.transcription_provider import ITranscriptionProvider
from models.results import (
    ProviderHTTPError,
    ProviderOK,
    ProviderResult,
    ProviderTransportError,
)
from models.schemas import ProviderRequest, ProviderResponse


def build_limits(max_connections: Optional[int] = None) -> httpx.Limits:
    """
    Connection pool limits for provider calls.

    max_connections=None leaves the pool unbounded, so concurrent requests
    never queue behind each other waiting for a free connection.
    """
    return httpx.Limits(
        max_keepalive_connections=HTTP_MAX_KEEPALIVE_CONNECTIONS,
        max_connections=max_connections,
        keepalive_expiry=HTTP_KEEPALIVE_EXPIRY,
    )


def build_timeout(total: float, connect: float) -> httpx.Timeout:
    """Timeout for provider calls; connect and pool waits share the overall budget."""
    return httpx.Timeout(
        timeout=total,
        connect=min(connect, total),
        pool=total,
    )


class HttpTranscriptionProvider(ITranscriptionProvider):
    """
    HTTP-based provider client with connection pooling.

    Posts JSON to `<base_url>/transcribe` and classifies the outcome into
    ProviderOK / ProviderHTTPError / ProviderTransportError.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[httpx.Timeout] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        limits: Optional[httpx.Limits] = None,
    ):
        """
        Initialize the provider client.

        Args:
            base_url: Provider base address (defaults to settings.aws_api_url)
            timeout: httpx timeout (defaults to settings provider timeouts)
            transport: Optional custom transport (used by tests)
            limits: Pool limits (defaults to settings.provider_max_connections)
        """
        settings = get_settings()
        self.base_url = (base_url or settings.aws_api_url).rstrip("/")
        self._timeout = timeout or build_timeout(
            settings.provider_timeout_seconds,
            settings.provider_connect_timeout_seconds,
        )
        self._limits = limits or build_limits(settings.provider_max_connections)
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def transcribe_url(self) -> str:
        return f"{self.base_url}{PROVIDER_TRANSCRIBE_PATH}"

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create reusable HTTP client with connection pooling."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                limits=self._limits,
                timeout=self._timeout,
                transport=self._transport,
            )
            logger.info(LogMessages.INIT_HTTP_CLIENT.format(base_url=self.base_url))
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            logger.info(LogMessages.CLOSE_HTTP_CLIENT)
        self._client = None

    async def transcribe(self, request: ProviderRequest) -> ProviderResult:
        """
        POST the request to the provider.

        Implements ITranscriptionProvider.transcribe() interface.
        """
        logger.info(
            LogMessages.PROVIDER_CALL.format(
                url=self.transcribe_url,
                variant=request.variant,
                language=request.language,
            )
        )
        client = await self._get_client()
        start = time.time()

        try:
            response = await client.post(
                self.transcribe_url,
                json=request.model_dump(by_alias=True),
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as e:
            reason = ErrorMessages.PROVIDER_TRANSPORT_ERROR.format(
                error=f"{type(e).__name__}: {e}"
            )
            logger.warning(reason)
            return ProviderTransportError(reason=reason)

        if not response.is_success:
            logger.warning(
                ErrorMessages.PROVIDER_HTTP_ERROR.format(status_code=response.status_code)
            )
            return ProviderHTTPError(status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            reason = ErrorMessages.PROVIDER_INVALID_JSON.format(error=e)
            logger.warning(reason)
            return ProviderTransportError(reason=reason)

        # A JSON null body has no fields to read at all
        if payload is None:
            reason = ErrorMessages.PROVIDER_NULL_BODY
            logger.warning(reason)
            return ProviderTransportError(reason=reason)

        logger.info(LogMessages.PROVIDER_OK.format(elapsed=time.time() - start))
        return ProviderOK(response=ProviderResponse.from_payload(payload))

    async def probe(self) -> Optional[int]:
        """
        GET the transcribe endpoint without a body.

        Implements ITranscriptionProvider.probe() interface.
        """
        logger.debug(LogMessages.PROVIDER_PROBE.format(url=self.transcribe_url))
        client = await self._get_client()
        try:
            response = await client.get(self.transcribe_url)
        except httpx.HTTPError as e:
            logger.warning(
                ErrorMessages.PROVIDER_TRANSPORT_ERROR.format(
                    error=f"{type(e).__name__}: {e}"
                )
            )
            return None
        return response.status_code


# Global singleton instance
_provider: Optional[HttpTranscriptionProvider] = None


def get_transcription_provider() -> HttpTranscriptionProvider:
    """
    Get or create global HttpTranscriptionProvider instance (singleton).

    Returns:
        HttpTranscriptionProvider instance
    """
    global _provider

    if _provider is None:
        logger.info("Creating HttpTranscriptionProvider instance...")
        _provider = HttpTranscriptionProvider()

    return _provider


async def close_transcription_provider() -> None:
    """Close the global provider client, if one was created."""
    global _provider

    if _provider is not None:
        await _provider.aclose()
        _provider = None
