"""Centralized error transformation for API routes.

Maps AGLD errors (domain and infrastructure) to JSON error responses of the
form ``{"error": <code>, "message": <text>}``.
"""

from typing import Any

from fastapi.responses import JSONResponse

from agld.domain.shared.error import (
    AgldError,
    BeadNotFoundError,
    ConnectivityError,
    InvalidBeadIdError,
    UnconfiguredError,
    ValueOverflowError,
)

ERROR_STATUS_MAP: dict[type[AgldError], int] = {
    InvalidBeadIdError: 400,
    BeadNotFoundError: 404,
    UnconfiguredError: 503,
    ConnectivityError: 500,
    ValueOverflowError: 500,
}


def error_body(code: str, message: str, **extra: Any) -> dict[str, Any]:
    return {"error": code, "message": message, **extra}


def map_agld_error(error: AgldError) -> JSONResponse:
    """Map an AGLD error to a JSON response.

    Args:
        error: The AGLD error to map.

    Returns:
        JSONResponse with the status code for the error class. Unknown
        subclasses fall back to 500.
    """
    content = error_body(error.code, error.message)
    if isinstance(error, BeadNotFoundError):
        content["beadId"] = error.bead_id

    status_code = next(
        (status for cls, status in ERROR_STATUS_MAP.items() if isinstance(error, cls)),
        500,
    )
    return JSONResponse(status_code=status_code, content=content)
