"""Translation of store errors and missing rows into HTTP responses."""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request, Response, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from tech_news.db.errors import StoreError

logger = logging.getLogger(__name__)


def not_found(entity: str) -> JSONResponse:
    """Return the 404 body used when a lookup by id matches nothing."""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"message": f"No {entity} found with this id"},
    )


def store_error_response(
    err: StoreError,
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
) -> JSONResponse:
    """Serialize a store error without exposing driver details."""
    return JSONResponse(
        status_code=status_code,
        content={"message": err.message, "error": type(err).__name__},
    )


async def _handle_store_error(request: Request, exc: StoreError) -> JSONResponse:
    logger.warning("%s %s failed: %s: %s", request.method, request.url.path, type(exc).__name__, exc)
    return store_error_response(exc)


async def _handle_sqlalchemy_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("%s %s failed in the database layer", request.method, request.url.path, exc_info=exc)
    return store_error_response(StoreError())


async def _handle_http_exception(request: Request, exc: StarletteHTTPException) -> Response:
    # Unmatched paths and unrouted methods both answer with a bare 404.
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return await http_exception_handler(request, exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the application's error translation on ``app``."""
    app.add_exception_handler(StoreError, _handle_store_error)
    app.add_exception_handler(SQLAlchemyError, _handle_sqlalchemy_error)
    app.add_exception_handler(StarletteHTTPException, _handle_http_exception)
