"""Error Handlers: global exception handlers for the Q&A API.

Invariants:
    - Every error response is a QAError envelope (code, message, category,
      severity, timestamp)
    - RequestValidationError → RequestDataError, 400 with per-field details
    - Exception (catch-all) → InternalError, 500 with the default message
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from qa_api.core.errors import InternalError, QAError, RequestDataError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(QAError, qa_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)


def _render(error: QAError) -> JSONResponse:
    return JSONResponse(
        status_code=error.http_status, content=error.to_response(),
    )


async def qa_error_handler(request: Request, exc: QAError):
    logger.error(
        f"QAError: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return _render(exc)


async def validation_error_handler(
    request: Request, exc: RequestValidationError,
):
    logger.warning(
        f"Validation error on {request.url.path}: {exc.errors()}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return _render(RequestDataError(_validation_details(exc)))


async def generic_error_handler(request: Request, exc: Exception):
    """Catch-all: the response never carries exception text."""
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc!r}",
        exc_info=True,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return _render(InternalError())


def _validation_details(exc: RequestValidationError) -> list[dict]:
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
