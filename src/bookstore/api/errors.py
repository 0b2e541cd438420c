"""Translate domain and HTTP errors into ``{"error": "..."}`` responses."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookstore.shared.errors import Forbidden, first_message
from bookstore.utils.logging import get_logger

logger = get_logger(__name__)

GENERIC_ERROR = "Có lỗi xảy ra, vui lòng thử lại sau"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return _error(400, first_message(exc.messages))


async def handle_not_found(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return _error(404, first_message(exc.messages))


async def handle_forbidden(request: Request, exc: Forbidden) -> JSONResponse:
    return _error(403, exc.message)


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = errors[0]["msg"] if errors else "Dữ liệu không hợp lệ"
    return _error(400, message)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error(exc.status_code, str(exc.detail))


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error", path=request.url.path, method=request.method)
    return _error(500, GENERIC_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(ObjectNotFoundError, handle_not_found)
    app.add_exception_handler(Forbidden, handle_forbidden)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected)
