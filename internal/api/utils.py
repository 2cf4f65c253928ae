"""
API utility functions for unified response formatting.

Service-level responses follow the format:
{
    "error_code": int,      # 0 = success, 1+ = error
    "message": str,         # Human-readable message
    "data": Any,            # Response data (omit if empty)
    "errors": Any           # Validation/error details (omit if none)
}
"""

from typing import Any, Dict


def success_response(
    message: str = "Success",
    data: Any = None,
) -> Dict[str, Any]:
    """
    Create a success response dictionary.

    Example:
        >>> success_response("API service is running", {"status": "running"})
        {"error_code": 0, "message": "API service is running", "data": {"status": "running"}}
    """
    response = {"error_code": 0, "message": message}
    if data is not None:
        response["data"] = data
    return response


def error_response(
    message: str,
    error_code: int = 1,
    errors: Any = None,
) -> Dict[str, Any]:
    """
    Create an error response dictionary.

    Example:
        >>> error_response("Validation error", errors={"language": "Invalid"})
        {"error_code": 1, "message": "Validation error", "errors": {"language": "Invalid"}}
    """
    response = {"error_code": error_code, "message": message}
    if errors is not None:
        response["errors"] = errors
    return response
