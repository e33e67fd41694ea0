"""
exception_handlers.py
- Purpose: Convert AppError, request validation errors and generic exceptions
  into consistent API responses.

Also logs errors with request context so failures are diagnosable.
"""

from __future__ import annotations

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from jobly.core import AppError, ErrorCode, ErrorReason
from jobly.core.errors import internal_error

logger = logging.getLogger("jobly.exceptions")


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        "app_error",
        extra={
            "path": str(getattr(request.url, "path", "")),
            "method": request.method,
            "status_code": exc.status_code,
            "code": getattr(exc, "code", None),
            "reason": getattr(exc, "reason", None),
            "error_message": exc.message,
        },
    )
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(exc.to_dict()))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = jsonable_encoder(exc.errors())
    logger.warning(
        "validation_error",
        extra={"path": request.url.path, "method": request.method, "errors": errors},
    )
    err = AppError(
        code=ErrorCode.VALIDATION_ERROR,
        reason=ErrorReason.INVALID_INPUT.value,
        message="Request payload failed validation",
        details={"errors": errors},
    )
    return JSONResponse(status_code=err.status_code, content=jsonable_encoder(err.to_dict()))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "unhandled_exception",
        extra={"path": str(getattr(request.url, "path", "")), "method": request.method},
    )
    err = internal_error("Unhandled exception")
    return JSONResponse(status_code=err.status_code, content=jsonable_encoder(err.to_dict()))
