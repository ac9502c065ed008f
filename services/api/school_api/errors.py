"""API error types and their JSON rendering.

Handlers raise `ApiError` (or `ValidationError` for bad input); the exception
handlers registered by `create_app` turn them into `{"error": <message>}`
bodies with the matching status code.
"""

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"
INVALID_JSON_MESSAGE = "Request body must be valid JSON"


class ApiError(Exception):
    """An error that maps directly onto an HTTP response."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class ValidationError(ApiError):
    """Client input failed a validation check (HTTP 400)."""

    def __init__(self, message: str):
        super().__init__(400, message)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Only reachable for bodies FastAPI could not parse; field checks are ours.
    logger.debug("Rejected unparseable request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": INVALID_JSON_MESSAGE})
