"""API schemas."""

from .common_schemas import StandardResponse, ServiceInfo

__all__ = ["StandardResponse", "ServiceInfo"]
