"""
Translation of failures into ``{status, message}`` JSON responses.

Domain errors map to status codes through ``ERROR_STATUS_CODES``; request
validation errors become 400 and any other ``HTTPException`` keeps its own
status code but uses the same payload shape.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend_fastapi.api.schemas import ErrorResponse
from core.domain.errors import (
    InvalidTaskError,
    TaskAlreadyExistsError,
    TaskError,
    TaskNotFoundError,
    TaskOperationError,
)

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES: dict[type[TaskError], int] = {
    InvalidTaskError: status.HTTP_400_BAD_REQUEST,
    TaskNotFoundError: status.HTTP_404_NOT_FOUND,
    TaskAlreadyExistsError: status.HTTP_409_CONFLICT,
    TaskOperationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

DEFAULT_MESSAGES: dict[int, str] = {
    status.HTTP_400_BAD_REQUEST: "Invalid task",
    status.HTTP_404_NOT_FOUND: "Task not found",
    status.HTTP_409_CONFLICT: "Task already exists",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "Internal server error",
}


def status_code_for(error: TaskError) -> int:
    for cls in type(error).__mro__:
        if cls in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def to_error_response(error: TaskError) -> ErrorResponse:
    status_code = status_code_for(error)
    message = str(error) or DEFAULT_MESSAGES[status_code]
    return ErrorResponse(status=status_code, message=message)


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        field = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        msg = err.get("msg", "Invalid value")
        parts.append(f"{field}: {msg}" if field else msg)
    return "; ".join(parts) or "Invalid request"


async def task_error_handler(request: Request, exc: TaskError) -> JSONResponse:
    body = to_error_response(exc)
    if body.status >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=body.status, content=body.model_dump())


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    body = ErrorResponse(
        status=status.HTTP_400_BAD_REQUEST, message=_validation_message(exc)
    )
    return JSONResponse(status_code=body.status, content=body.model_dump())


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    body = ErrorResponse(status=exc.status_code, message=str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(),
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TaskError, task_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
