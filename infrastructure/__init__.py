"""
Infrastructure Layer - External system integrations.

This layer contains implementations of interfaces defined in the interfaces/ layer.
Each subdirectory groups implementations by external dependency.

Structure:
- http/     - HTTP client for the transcription provider
"""

from .http import HttpTranscriptionProvider, get_transcription_provider

__all__ = [
    "HttpTranscriptionProvider",
    "get_transcription_provider",
]
