"""
HTTP Infrastructure - HTTP client implementations.

This module provides:
- HttpTranscriptionProvider: Async provider client (implements ITranscriptionProvider)
"""

from .provider_client import (
    HttpTranscriptionProvider,
    get_transcription_provider,
    close_transcription_provider,
)

__all__ = [
    "HttpTranscriptionProvider",
    "get_transcription_provider",
    "close_transcription_provider",
]
