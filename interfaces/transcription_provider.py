"""
Transcription Provider Interface - Abstract interface for the remote provider.
"""

from abc import ABC, abstractmethod
from typing import Optional

from models.results import ProviderResult
from models.schemas import ProviderRequest


class ITranscriptionProvider(ABC):
    """
    Abstract interface for delivering transcription requests to a provider.

    Implementations:
    - infrastructure.http.provider_client.HttpTranscriptionProvider
    """

    @abstractmethod
    async def transcribe(self, request: ProviderRequest) -> ProviderResult:
        """
        Send one transcription request to the provider.

        Args:
            request: File or demo variant of the provider request

        Returns:
            ProviderOK, ProviderHTTPError or ProviderTransportError.
            Implementations never raise for provider-side failures.
        """
        pass

    @abstractmethod
    async def probe(self) -> Optional[int]:
        """
        Check provider reachability without side effects.

        Returns:
            HTTP status code of the probe, or None if the exchange failed
        """
        pass
