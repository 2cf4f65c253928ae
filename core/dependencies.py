"""
FastAPI dependency injection functions for routes.
"""


def get_gateway_dependency():
    """
    FastAPI dependency for TranscriptionGateway.

    Usage in routes:
        @router.post("/api/transcribe")
        async def transcribe(
            gateway: TranscriptionGateway = Depends(get_gateway_dependency)
        ):
            ...

    Returns:
        TranscriptionGateway instance with injected provider
    """
    from core.container import get_gateway

    return get_gateway()
