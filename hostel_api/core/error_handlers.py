# hostel_api/core/error_handlers.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException
import logging

from .exceptions import HostelException

logger = logging.getLogger(__name__)


def _envelope(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


async def hostel_exception_handler(request: Request, exc: HostelException):
    """Handle validation, business-rule and database exceptions"""
    if exc.status_code >= 500:
        logger.error(f"{exc.message} - Path: {request.url.path}")
    else:
        logger.info(f"{exc.__class__.__name__}: {exc.message} - Path: {request.url.path}")
    return _envelope(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed or missing request fields answer 400, not FastAPI's default 422"""
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ())[1:]) or "request"
        message = f"Invalid {field}: {first.get('msg', 'invalid value')}"
    else:
        message = "Invalid request"
    logger.info(f"Rejected request - Path: {request.url.path} - {message}")
    return _envelope(400, message)


async def http_exception_handler(request: Request, exc: HTTPException):
    return _envelope(exc.status_code, str(exc.detail))


async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    """Storage failures are logged with traceback and surfaced generically"""
    sanitized_error = str(exc).replace('\n', ' ').replace('\r', ' ').replace('\t', ' ')[:200]
    logger.error("Database error on %s: %s", request.url.path, sanitized_error, exc_info=exc)
    return _envelope(500, "Database error")


async def general_exception_handler(request: Request, exc: Exception):
    """Anything unhandled still answers with the JSON envelope"""
    logger.error(f"Unexpected error: {exc} - Path: {request.url.path}", exc_info=exc)
    return _envelope(500, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HostelException, hostel_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
