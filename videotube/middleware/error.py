import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from videotube.config.environments import ENVIRONMENT
from videotube.utility.api_error import ApiError

logger = logging.getLogger(__name__)


def _error_response(error: ApiError) -> JSONResponse:
    return JSONResponse(
        status_code=error.status_code,
        content=jsonable_encoder(error.to_dict(include_stack=ENVIRONMENT == "development")),
    )


async def api_error_handler(request: Request, exc: ApiError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return _error_response(exc)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    # Rejected input can be an UploadFile, never echo it back
    errors = [{key: value for key, value in error.items() if key != "input"} for error in exc.errors()]
    return _error_response(ApiError(400, "Invalid request", errors=errors, stack=""))


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return _error_response(ApiError(exc.status_code, str(exc.detail), stack=""))


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("%s %s crashed", request.method, request.url.path)
    return _error_response(ApiError(500, "Internal Server Error", stack=""))


def add_error_handlers(application):
    application.add_exception_handler(ApiError, api_error_handler)
    application.add_exception_handler(RequestValidationError, validation_error_handler)
    application.add_exception_handler(StarletteHTTPException, http_error_handler)
    application.add_exception_handler(Exception, unhandled_error_handler)
