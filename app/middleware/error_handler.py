"""
Exception handlers that render every failure as

    {"success": false, "message": ..., "error": {"code", "details", "field"}}
"""

import logging
import traceback

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from app.utils.exceptions import AppException, DuplicateEntryException, ErrorCode

logger = logging.getLogger(__name__)

VALUE_ERROR_PREFIX = "Value error, "


def _envelope(status_code: int, message: str, error: dict) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message, "error": error},
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Our own exceptions already carry the envelope in `detail`."""
    return _envelope(exc.status_code, exc.detail["message"], exc.detail["error"])


def _field_errors(exc: RequestValidationError) -> list[dict]:
    out = []
    for err in exc.errors():
        # loc looks like ("body", "customerName") or ("query", "page")
        parts = [str(p) for p in err.get("loc", ()) if p != "body"]
        msg = err.get("msg", "Invalid value")
        if msg.startswith(VALUE_ERROR_PREFIX):
            msg = msg[len(VALUE_ERROR_PREFIX):]
        out.append({"field": ".".join(parts) or "body", "message": msg})
    return out


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Request body / query validation (422).
    The first failing field is the headline message; all of them are listed
    in error.details.
    """
    details = _field_errors(exc)
    first = details[0] if details else {"field": None, "message": "Validation error. Please check your input."}
    return _envelope(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        first["message"],
        {"code": ErrorCode.VALIDATION_ERROR, "details": details, "field": first["field"]},
    )


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Unique / FK / check violations that slipped past validation."""
    logger.warning(f"IntegrityError on {request.method} {request.url.path}: {exc.orig}")
    return await app_exception_handler(request, DuplicateEntryException())


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything unexpected: log the traceback, hide it from the client."""
    logger.error(f"Unhandled exception on {request.method} {request.url.path}\n{traceback.format_exc()}")
    return _envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred. Please try again later.",
        {"code": ErrorCode.INTERNAL_SERVER_ERROR, "details": None, "field": None},
    )
