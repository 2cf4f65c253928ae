"""
Shared fixtures for gateway tests.

The provider is never contacted: tests either use StubProvider or an
HttpTranscriptionProvider wired to an httpx.MockTransport.
"""

import sys
from pathlib import Path
from typing import Callable, List, Optional

import httpx
import pytest

# Get project root (parent of tests directory)
PROJECT_ROOT = Path(__file__).parent.parent

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from core.config import get_settings  # noqa: E402
from core.container import Container  # noqa: E402
from infrastructure.http.provider_client import HttpTranscriptionProvider  # noqa: E402
from interfaces.transcription_provider import ITranscriptionProvider  # noqa: E402
from models.results import ProviderResult  # noqa: E402
from models.schemas import ProviderRequest  # noqa: E402

PROVIDER_URL = "http://provider.test/prod"


class StubProvider(ITranscriptionProvider):
    """Provider double returning canned results and recording requests."""

    def __init__(
        self,
        result: Optional[ProviderResult] = None,
        probe_status: Optional[int] = 200,
        error: Optional[Exception] = None,
    ):
        self.result = result
        self.probe_status = probe_status
        self.error = error
        self.requests: List[ProviderRequest] = []
        self.probe_calls = 0

    async def transcribe(self, request: ProviderRequest) -> ProviderResult:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.result

    async def probe(self) -> Optional[int]:
        self.probe_calls += 1
        if self.error is not None:
            raise self.error
        return self.probe_status


def make_http_provider(
    handler: Callable[[httpx.Request], httpx.Response],
) -> HttpTranscriptionProvider:
    """HttpTranscriptionProvider whose traffic goes to `handler`."""
    return HttpTranscriptionProvider(
        base_url=PROVIDER_URL,
        transport=httpx.MockTransport(handler),
    )


def refuse_connection(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("Connection refused", request=request)


@pytest.fixture(autouse=True)
def reset_state():
    """Fresh settings and DI container for every test."""
    get_settings.cache_clear()
    Container.clear()
    yield
    get_settings.cache_clear()
    Container.clear()
