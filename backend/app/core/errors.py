"""
app/core/errors.py - Exception handlers rendering the error envelope.

    {"success": false, "error": {"message": "...", "code": "...", "details": {...}}}

| Raised                        | Status | code |
|-------------------------------|--------|------|
| `AppError` subclasses         | own    | own |
| request validation (pydantic) | 400    | `INVALID_INPUT` |
| `HTTPException` (auth, 404s)  | own    | `UNAUTHORIZED` / `FORBIDDEN` / `NOT_FOUND` / `HTTP_ERROR` |
| `GoogleAPICallError`          | 500    | `STORAGE_FAILURE` |
| anything else                 | 500    | `INTERNAL_ERROR` |
"""
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from google.api_core.exceptions import GoogleAPICallError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import AppError
from app.schemas.common import ErrorBody, ErrorEnvelope

logger = logging.getLogger(__name__)

_HTTP_CODES = {401: "UNAUTHORIZED", 403: "FORBIDDEN", 404: "NOT_FOUND", 405: "METHOD_NOT_ALLOWED"}


def error_response(status_code: int, message: str, code: str,
                   details: Optional[Dict[str, Any]] = None, headers=None) -> JSONResponse:
    body = ErrorEnvelope(error=ErrorBody(message=message, code=code, details=details or None))
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body.model_dump()),
        headers=headers,
    )


async def _app_error(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return error_response(exc.status_code, exc.message, exc.code, exc.details)


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"loc": list(e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")}
        for e in exc.errors()
    ]
    return error_response(400, "Invalid request", "INVALID_INPUT", {"errors": errors})


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    code = _HTTP_CODES.get(exc.status_code, "HTTP_ERROR")
    return error_response(
        exc.status_code, str(exc.detail), code, headers=getattr(exc, "headers", None)
    )


async def _storage_error(request: Request, exc: GoogleAPICallError) -> JSONResponse:
    logger.exception("storage failure on %s %s", request.method, request.url.path)
    return error_response(500, "Storage operation failed", "STORAGE_FAILURE")


async def _unhandled(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return error_response(500, "Internal server error", "INTERNAL_ERROR")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, _app_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(GoogleAPICallError, _storage_error)
    app.add_exception_handler(Exception, _unhandled)
