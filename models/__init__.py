"""
Models Layer - Data models and Pydantic schemas.

This layer contains:
- Pydantic schemas for inbound, provider and gateway DTOs
- Provider call result types
"""

from .schemas import (
    InboundFile,
    InboundRequest,
    FileProviderRequest,
    DemoProviderRequest,
    ProviderRequest,
    ProviderResponse,
    GatewayResponse,
    HealthReport,
)
from .results import (
    ProviderOK,
    ProviderHTTPError,
    ProviderTransportError,
    ProviderResult,
)

__all__ = [
    # Inbound
    "InboundFile",
    "InboundRequest",
    # Provider request/response
    "FileProviderRequest",
    "DemoProviderRequest",
    "ProviderRequest",
    "ProviderResponse",
    # Provider outcomes
    "ProviderOK",
    "ProviderHTTPError",
    "ProviderTransportError",
    "ProviderResult",
    # Gateway
    "GatewayResponse",
    "HealthReport",
]
