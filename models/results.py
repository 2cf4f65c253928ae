"""
Provider call outcomes.

A provider call ends in exactly one of three states; the fallback policy
maps each of them onto a GatewayResponse.
"""

from typing import Union

from pydantic import BaseModel, ConfigDict

from models.schemas import ProviderResponse


class ProviderOK(BaseModel):
    """HTTP 2xx with a parseable, non-null JSON body."""

    model_config = ConfigDict(frozen=True)

    response: ProviderResponse


class ProviderHTTPError(BaseModel):
    """The provider answered with a non-2xx status; the body is not used."""

    model_config = ConfigDict(frozen=True)

    status_code: int


class ProviderTransportError(BaseModel):
    """The HTTP exchange did not complete (refused, timeout, DNS, unparseable or null body)."""

    model_config = ConfigDict(frozen=True)

    reason: str


ProviderResult = Union[ProviderOK, ProviderHTTPError, ProviderTransportError]
