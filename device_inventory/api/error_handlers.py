"""
Exception handlers mapping errors onto the {success, message} envelope.

AppError subclasses carry their own status code; request validation failures
become 400 with per-field details; anything unexpected is logged and
reported as a generic 500.
"""

# Standard library imports
import logging
from typing import Any, Dict, List, Optional

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from ..core.exceptions import AppError, ValidationError

logger = logging.getLogger(__name__)


def error_body(message: str, code: Optional[str] = None, details: Optional[Any] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": False, "message": message}
    if code:
        body["code"] = code
    if details is not None:
        body["details"] = details
    return body


def _validation_details(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    details = []
    for error in errors:
        # Drop the "body"/"query"/"path" prefix so field reads like the JSON key
        location = [str(part) for part in error.get("loc", ())[1:]]
        details.append({
            "field": ".".join(location),
            "message": error.get("msg", ""),
            "type": error.get("type", ""),
        })
    return details


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.message, exc.code, exc.details),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = ValidationError("Validation failed", details=_validation_details(exc.errors()))
    return await app_error_handler(request, error)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error", AppError.code),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
