"""
Transcription Routes - Gateway endpoints consumed by the dashboard.

Both endpoints always answer HTTP 200. Callers branch on the `success`
field of the body, never on the transport status.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile

from core.dependencies import get_gateway_dependency
from core.logger import logger
from models.schemas import GatewayResponse, HealthReport, InboundRequest
from services.fallback import backup_response
from services.gateway import TranscriptionGateway
from services.normalizer import read_upload, resolve_language

router = APIRouter(prefix="/api", tags=["Transcription"])


async def parse_inbound(request: Request) -> InboundRequest:
    """
    Read the multipart submission into an InboundRequest.

    `file` is optional and anything that is not a file part counts as no
    file. `language` defaults to auto.
    """
    form = await request.form()

    part = form.get("file")
    upload: Optional[UploadFile] = part if isinstance(part, UploadFile) else None

    language = form.get("language")
    if not isinstance(language, str):
        language = None

    return InboundRequest(
        file=await read_upload(upload),
        language=resolve_language(language),
    )


@router.post(
    "/transcribe",
    response_model=GatewayResponse,
    response_model_exclude_none=True,
    summary="Transcribe an uploaded audio/video file",
    description="""
Forward an uploaded file (or, with no file, the demo placeholder) to the
transcription provider.

**Multipart form fields:**
- `file` (optional): audio or video file
- `language` (optional): language code, defaults to `auto`

**Always returns HTTP 200.** Check `success` in the body:

```json
{
  "success": true,
  "transcription": "...",
  "language": "es",
  "provider": "AWS Lambda Enterprise"
}
```

`provider` tells which path produced the text: `AWS Lambda Enterprise`,
`Anna Logica Enterprise (Fallback)` or `Enterprise Backup`
(the latter with `success: false` and an `error` field).
""",
)
async def transcribe(
    request: Request,
    gateway: TranscriptionGateway = Depends(get_gateway_dependency),
) -> JSONResponse:
    """Transcribe one uploaded file through the gateway."""
    try:
        inbound = await parse_inbound(request)
        result = await gateway.transcribe(inbound)
    except Exception as e:
        logger.error(f"Transcription route error: {e}")
        logger.exception("Transcription route error details:")
        result = backup_response()

    # 200 even for backup responses so the frontend never sees an HTTP error
    return JSONResponse(status_code=200, content=result.to_body())


@router.get(
    "/transcribe",
    response_model=HealthReport,
    summary="Gateway health check",
    description="Reports the gateway as healthy and whether the provider answers. Always HTTP 200.",
)
async def transcribe_health(
    gateway: TranscriptionGateway = Depends(get_gateway_dependency),
) -> JSONResponse:
    """Probe provider reachability."""
    report = await gateway.health()
    return JSONResponse(status_code=200, content=report.model_dump())
