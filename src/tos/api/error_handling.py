from __future__ import annotations

import logging
from typing import cast

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tos.application.dto.responses import ErrorResponse
from tos.application.errors import (
    InvalidJsonRequestError,
    InvalidPathRequestError,
    OrderServiceError,
    ServerError,
)

logger = logging.getLogger("tos.api.errors")


def _error_response(*, status_code: int, error_cause: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(status_code=status_code, error_cause=error_cause).model_dump(),
    )


def error_response_for(exc: OrderServiceError) -> JSONResponse:
    return _error_response(status_code=exc.status_code, error_cause=exc.error_cause)


async def _order_service_exception_handler(_: Request, exc: Exception) -> JSONResponse:
    service_exc = cast(OrderServiceError, exc)
    if service_exc.status_code >= 500:
        logger.error("request_failed", extra={"status_code": service_exc.status_code})
    else:
        logger.info("request_rejected", extra={"status_code": service_exc.status_code})
    return error_response_for(service_exc)


async def _validation_exception_handler(_: Request, exc: Exception) -> JSONResponse:
    validation_exc = cast(RequestValidationError, exc)
    errors = validation_exc.errors()
    if any(tuple(error.get("loc", ()))[:1] == ("path",) for error in errors):
        shape_error: OrderServiceError = InvalidPathRequestError()
    else:
        shape_error = InvalidJsonRequestError()
    logger.info("request_malformed", extra={"status_code": shape_error.status_code})
    return error_response_for(shape_error)


async def _http_exception_handler(_: Request, exc: Exception) -> JSONResponse:
    http_exc = cast(StarletteHTTPException, exc)
    error_cause = str(http_exc.detail) if http_exc.detail else "request failed"
    return _error_response(status_code=http_exc.status_code, error_cause=error_cause)


async def _unhandled_exception_handler(_: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_exception", exc_info=exc)
    return error_response_for(ServerError("internal server error"))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(OrderServiceError, _order_service_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
