"""
Proxy Error Responses

Maps dispatch failures to the JSON error shape the dashboard expects:
{"message": <fallback message>, "details": <raw detail>}.
"""

from fastapi.responses import JSONResponse

from sar_mcp.configs import get_logger
from sar_mcp.exceptions import (
    MissingConfigError,
    RemoteConnectionError,
    RemoteRequestError,
    ToolValidationError,
)

logger = get_logger("http.errors")


def backend_error_response(error: Exception, fallback_message: str) -> JSONResponse:
    """
    Build the error response for a failed proxy call.

    Args:
        error: Exception raised while dispatching
        fallback_message: Human-readable message for the dashboard toast

    Returns:
        JSONResponse with the remote status (or 400/500/502)
    """
    if isinstance(error, ToolValidationError):
        return JSONResponse({"message": fallback_message, "details": error.errors}, status_code=400)

    if isinstance(error, MissingConfigError):
        return JSONResponse(
            {"message": fallback_message, "details": "Missing API_BASE env var"},
            status_code=500,
        )

    if isinstance(error, RemoteConnectionError):
        logger.error(f"{fallback_message}: {error}")
        return JSONResponse({"message": fallback_message, "details": error.message}, status_code=502)

    if isinstance(error, RemoteRequestError) and error.status_code is not None:
        return JSONResponse(
            {"message": fallback_message, "details": error.response_text or ""},
            status_code=error.status_code if error.status_code >= 400 else 502,
        )

    logger.error(f"{fallback_message}: {error}")
    return JSONResponse({"message": fallback_message}, status_code=500)
