"""
Unit tests for TranscriptionGateway.

The gateway is exercised with StubProvider (canned results) and with the
real HTTP client behind httpx.MockTransport or a local asyncio server.
"""

import asyncio
import base64
import json
import re
from contextlib import asynccontextmanager

import httpx
import pytest

from infrastructure.http.provider_client import HttpTranscriptionProvider
from models.results import ProviderHTTPError, ProviderOK, ProviderTransportError
from models.schemas import (
    DemoProviderRequest,
    FileProviderRequest,
    InboundFile,
    InboundRequest,
    ProviderResponse,
)
from services.gateway import TranscriptionGateway, iso_timestamp, reachability_for
from tests.conftest import StubProvider, make_http_provider, refuse_connection

MB = 1024 * 1024


def inbound_with_file(name="talk.mp3", content=b"audio-bytes", language="es"):
    return InboundRequest(
        file=InboundFile(name=name, content=content, size=len(content)),
        language=language,
    )


class TestTranscribe:
    """Tests for TranscriptionGateway.transcribe"""

    @pytest.mark.asyncio
    async def test_success_path(self):
        provider = StubProvider(
            result=ProviderOK(response=ProviderResponse(transcription="T", language="L2"))
        )
        gateway = TranscriptionGateway(provider=provider)

        response = await gateway.transcribe(inbound_with_file())

        assert response.to_body() == {
            "success": True,
            "transcription": "T",
            "language": "L2",
            "provider": "AWS Lambda Enterprise",
        }
        sent = provider.requests[0]
        assert isinstance(sent, FileProviderRequest)
        assert base64.b64decode(sent.file_content) == b"audio-bytes"

    @pytest.mark.asyncio
    async def test_demo_request_when_no_file(self):
        provider = StubProvider(result=ProviderOK(response=ProviderResponse()))
        gateway = TranscriptionGateway(provider=provider)

        response = await gateway.transcribe(InboundRequest(language="it"))

        assert isinstance(provider.requests[0], DemoProviderRequest)
        assert response.transcription == "Transcripción completada"
        assert response.language == "it"

    @pytest.mark.asyncio
    async def test_http_error_uses_enterprise_fallback(self):
        provider = StubProvider(result=ProviderHTTPError(status_code=500))
        gateway = TranscriptionGateway(provider=provider)
        content = b"x" * (2 * MB)

        response = await gateway.transcribe(inbound_with_file("big.wav", content, "pt"))

        assert response.success is True
        assert response.provider == "Anna Logica Enterprise (Fallback)"
        assert response.language == "pt"
        assert '"big.wav"' in response.transcription
        assert "Tamaño: 2 MB." in response.transcription

    @pytest.mark.asyncio
    async def test_transport_error_uses_backup(self):
        gateway = TranscriptionGateway(
            provider=StubProvider(result=ProviderTransportError(reason="refused"))
        )

        response = await gateway.transcribe(inbound_with_file())

        assert response.success is False
        assert response.provider == "Enterprise Backup"
        assert response.error == "Error processing transcription"
        assert response.language is None

    @pytest.mark.asyncio
    async def test_unexpected_exception_uses_backup(self):
        gateway = TranscriptionGateway(provider=StubProvider(error=RuntimeError("boom")))

        response = await gateway.transcribe(inbound_with_file())

        assert response.success is False
        assert response.provider == "Enterprise Backup"

    @pytest.mark.asyncio
    async def test_repeated_calls_are_identical(self):
        provider = make_http_provider(
            lambda request: httpx.Response(200, json={"transcription": "igual", "language": "es"})
        )
        gateway = TranscriptionGateway(provider=provider)

        first = await gateway.transcribe(inbound_with_file())
        second = await gateway.transcribe(inbound_with_file())
        await provider.aclose()

        assert first.model_dump_json() == second.model_dump_json()

    @pytest.mark.asyncio
    async def test_connection_refused_end_to_end(self):
        provider = make_http_provider(refuse_connection)
        gateway = TranscriptionGateway(provider=provider)

        response = await gateway.transcribe(InboundRequest())
        await provider.aclose()

        assert response.success is False
        assert response.provider == "Enterprise Backup"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body,transcription",
        [
            (["a", "b"], "Transcripción completada"),
            ({"transcription": "hola", "language": 5}, "hola"),
            ({"transcription": 123}, "Transcripción completada"),
            ({"transcription": None, "message": "aviso"}, "aviso"),
        ],
    )
    async def test_odd_2xx_bodies_stay_on_primary_path(self, body, transcription):
        provider = make_http_provider(lambda request: httpx.Response(200, json=body))
        gateway = TranscriptionGateway(provider=provider)

        response = await gateway.transcribe(inbound_with_file(language="es"))
        await provider.aclose()

        assert response.to_body() == {
            "success": True,
            "transcription": transcription,
            "language": "es",
            "provider": "AWS Lambda Enterprise",
        }


@asynccontextmanager
async def slow_provider_server(delay: float):
    """
    Local HTTP/1.1 server answering every request after `delay` seconds.

    Yields (base_url, stats); stats["peak"] is the highest number of
    connections open at the same time.
    """
    stats = {"active": 0, "peak": 0}
    body = json.dumps({"transcription": "ok", "language": "es"}).encode()

    async def handle(reader: asyncio.StreamReader, writer: asyncio.StreamWriter):
        stats["active"] += 1
        stats["peak"] = max(stats["peak"], stats["active"])
        try:
            head = await reader.readuntil(b"\r\n\r\n")
            length = 0
            for line in head.split(b"\r\n"):
                name, _, value = line.partition(b":")
                if name.strip().lower() == b"content-length":
                    length = int(value.strip())
            if length:
                await reader.readexactly(length)
            await asyncio.sleep(delay)
        finally:
            stats["active"] -= 1
        writer.write(
            b"HTTP/1.1 200 OK\r\n"
            b"Content-Type: application/json\r\n"
            b"Content-Length: " + str(len(body)).encode() + b"\r\n"
            b"Connection: close\r\n\r\n" + body
        )
        await writer.drain()
        writer.close()

    server = await asyncio.start_server(handle, "127.0.0.1", 0)
    port = server.sockets[0].getsockname()[1]
    try:
        yield f"http://127.0.0.1:{port}/prod", stats
    finally:
        server.close()
        await server.wait_closed()


def clear_proxy_env(monkeypatch):
    """The local server must be reached directly, never through an env proxy."""
    for name in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY"):
        monkeypatch.delenv(name, raising=False)
        monkeypatch.delenv(name.lower(), raising=False)


class TestConcurrency:
    """Many callers sharing one provider client"""

    @pytest.mark.asyncio
    async def test_concurrent_calls_do_not_queue_for_connections(self, monkeypatch):
        clear_proxy_env(monkeypatch)
        callers = 40

        async with slow_provider_server(delay=0.5) as (base_url, stats):
            provider = HttpTranscriptionProvider(base_url=base_url)
            gateway = TranscriptionGateway(provider=provider)

            responses = await asyncio.gather(
                *(gateway.transcribe(inbound_with_file()) for _ in range(callers))
            )
            await provider.aclose()

        assert all(r.success for r in responses)
        assert {r.provider for r in responses} == {"AWS Lambda Enterprise"}
        assert stats["peak"] == callers

    @pytest.mark.asyncio
    async def test_configured_cap_still_serves_everyone(self, monkeypatch):
        clear_proxy_env(monkeypatch)
        monkeypatch.setenv("PROVIDER_MAX_CONNECTIONS", "2")
        monkeypatch.setenv("PROVIDER_TIMEOUT_SECONDS", "5")

        async with slow_provider_server(delay=0.2) as (base_url, stats):
            provider = HttpTranscriptionProvider(base_url=base_url)
            gateway = TranscriptionGateway(provider=provider)

            responses = await asyncio.gather(
                *(gateway.transcribe(inbound_with_file()) for _ in range(6))
            )
            await provider.aclose()

        assert all(r.success for r in responses)
        assert stats["peak"] <= 2


class TestHealth:
    """Tests for TranscriptionGateway.health"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "probe_status,aws",
        [(200, "connected"), (204, "connected"), (403, "disconnected"), (None, "fallback mode")],
    )
    async def test_reachability(self, probe_status, aws):
        gateway = TranscriptionGateway(provider=StubProvider(probe_status=probe_status))

        report = await gateway.health()

        assert report.status == "healthy"
        assert report.service == "Anna Logica Clean"
        assert report.aws == aws

    @pytest.mark.asyncio
    async def test_probe_exception_means_fallback_mode(self):
        gateway = TranscriptionGateway(provider=StubProvider(error=RuntimeError("probe broke")))

        report = await gateway.health()

        assert report.status == "healthy"
        assert report.aws == "fallback mode"

    @pytest.mark.asyncio
    async def test_unreachable_provider(self):
        provider = make_http_provider(refuse_connection)
        gateway = TranscriptionGateway(provider=provider)

        report = await gateway.health()
        await provider.aclose()

        assert report.aws == "fallback mode"

    @pytest.mark.asyncio
    async def test_timestamp_is_iso_8601(self):
        gateway = TranscriptionGateway(provider=StubProvider())

        report = await gateway.health()

        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", report.timestamp)


def test_reachability_for_boundaries():
    assert reachability_for(299).value == "connected"
    assert reachability_for(300).value == "disconnected"
    assert reachability_for(None).value == "fallback mode"


def test_iso_timestamp_format():
    from datetime import datetime, timezone

    stamp = iso_timestamp(datetime(2025, 3, 4, 5, 6, 7, 890000, tzinfo=timezone.utc))

    assert stamp == "2025-03-04T05:06:07.890Z"
