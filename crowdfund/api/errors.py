"""
Exception handlers that turn failures into `{success, message}` JSON.

Status codes are fixed per error type; nothing that failed answers 200.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from crowdfund.errors import CrowdfundError, PersistenceError, format_validation_errors

logger = logging.getLogger(__name__)


def _failure(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message}, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(CrowdfundError)
    async def _crowdfund_error_handler(request: Request, exc: CrowdfundError) -> Response:
        if exc.status_code >= 500:
            logger.error("request_failed path=%s status=%d message=%s", request.url.path, exc.status_code, exc.message)
        else:
            logger.info("request_rejected path=%s status=%d message=%s", request.url.path, exc.status_code, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_public_dict())

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(request: Request, exc: RequestValidationError) -> Response:
        message = format_validation_errors(list(exc.errors()))
        logger.info("request_invalid path=%s message=%s", request.url.path, message)
        return _failure(400, message)

    @app.exception_handler(StarletteHTTPException)
    async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
        return _failure(exc.status_code, str(exc.detail), headers=dict(exc.headers or {}) or None)

    @app.exception_handler(SQLAlchemyError)
    async def _database_error_handler(request: Request, exc: SQLAlchemyError) -> Response:
        logger.exception("database_error path=%s", request.url.path)
        return _failure(500, PersistenceError.default_message)
