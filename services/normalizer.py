"""
Request Normalizer - Turns an inbound submission into one provider request.

No validation of file type, size ceiling or encoding is done here; the
full upload is buffered once for base64 encoding.
"""

import base64
from typing import Optional

from starlette.datastructures import UploadFile  # type: ignore

from core.constants import DEFAULT_LANGUAGE, UPLOADED_FILE_PREFIX
from core.logger import logger
from core.messages import ErrorMessages, LogMessages
from models.schemas import (
    DemoProviderRequest,
    FileProviderRequest,
    InboundFile,
    InboundRequest,
    ProviderRequest,
)


def resolve_language(language: Optional[str]) -> str:
    """Missing or empty language means auto-detection."""
    return language or DEFAULT_LANGUAGE


def uploaded_file_path(file_name: str) -> str:
    return f"{UPLOADED_FILE_PREFIX}{file_name}"


async def read_upload(upload: Optional[UploadFile]) -> Optional[InboundFile]:
    """
    Buffer an uploaded file part into an InboundFile.

    Any failure while reading the part is treated as "no file".
    """
    if upload is None:
        return None

    name = upload.filename or ""
    try:
        content = await upload.read()
    except Exception as e:
        logger.warning(ErrorMessages.UPLOAD_READ_FAILED.format(name=name, error=e))
        return None

    return InboundFile(name=name, content=content, size=len(content))


def normalize_request(inbound: InboundRequest) -> ProviderRequest:
    """
    Build exactly one ProviderRequest variant for an inbound request.

    Args:
        inbound: Caller request with optional file and language

    Returns:
        FileProviderRequest when a non-empty file is present,
        DemoProviderRequest otherwise
    """
    language = resolve_language(inbound.language)
    upload = inbound.file

    if upload is not None and upload.is_real:
        logger.info(LogMessages.REQUEST_FILE.format(name=upload.name, size=upload.size))
        return FileProviderRequest(
            language=language,
            file_name=upload.name,
            file_content=base64.b64encode(upload.content).decode("ascii"),
            file_path=uploaded_file_path(upload.name),
        )

    request = DemoProviderRequest(language=language)
    logger.info(LogMessages.REQUEST_DEMO.format(path=request.file_path))
    return request
