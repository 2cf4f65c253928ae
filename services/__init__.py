"""
Services Layer - Business logic of the transcription gateway.
"""

from .gateway import TranscriptionGateway
from .normalizer import normalize_request, read_upload
from .fallback import map_provider_result, backup_response

__all__ = [
    "TranscriptionGateway",
    "normalize_request",
    "read_upload",
    "map_provider_result",
    "backup_response",
]
