"""Exception handlers that render every error as a small JSON body."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from json_server.api.schemas import ErrorResponse

logger = logging.getLogger(__name__)


def error_response(
    status_code: int, body: ErrorResponse, headers: dict[str, str] | None = None
) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True), headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    headers = dict(exc.headers) if exc.headers else None
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        body = ErrorResponse(error="not found", path=request.url.path)
    elif exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        body = ErrorResponse(error="method not allowed", method=request.method)
    else:
        body = ErrorResponse(error=str(exc.detail))
    return error_response(exc.status_code, body, headers)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error while serving %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorResponse(error="internal server error"))


def install_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)
