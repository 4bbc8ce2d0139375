"""
Exception handlers that turn every failure into an ``APIResponse`` envelope.

Domain errors carry their own status code; FastAPI's ``HTTPException`` and
request validation errors are wrapped unchanged in meaning; anything else is
logged with an error id and reported as a 500.
"""

import traceback

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from ..core.exceptions import VillaAPIError
from ..core.logging_config import get_logger
from ..schemas.api_response import failure

logger = get_logger(__name__)


def _envelope(status_code: int, *messages: str, headers=None) -> JSONResponse:
    body = failure(*messages, status_code=status_code)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"), headers=headers)


async def villa_api_error_handler(request: Request, exc: VillaAPIError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return _envelope(exc.status_code, exc.message)


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return _envelope(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return _envelope(status.HTTP_400_BAD_REQUEST, *messages)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unhandled exception with an error id and hide its details from the client."""
    error_id = id(exc)
    logger.error(
        f"Unhandled exception [{error_id}] in {request.method} {request.url.path}: {exc}",
        exc_info=True,
        extra={
            "error_id": error_id,
            "path": request.url.path,
            "error_type": type(exc).__name__,
            "traceback": traceback.format_exc(),
        },
    )
    return _envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, f"Internal server error (error id {error_id})")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(VillaAPIError, villa_api_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
