"""
Interface Layer - Abstract interfaces for dependency injection.

This layer defines contracts that infrastructure implementations must fulfill.
Services depend on these interfaces, not concrete implementations.
"""

from .transcription_provider import ITranscriptionProvider

__all__ = [
    "ITranscriptionProvider",
]
