from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from app.directory.core.error_catalog import AppError, ErrorCatalog


_HTTP_STATUS_CODES = {
    400: "BAD_REQUEST",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


def _set_error_context(request: Request, code: str, exc: Exception | None = None) -> None:
    request.state.error_code = code
    if exc is not None:
        request.state.error_class = exc.__class__.__name__


def _trace_id(request: Request) -> str:
    return getattr(request.state, "trace_id", "")


def _http_error_code(status_code: int) -> str:
    return _HTTP_STATUS_CODES.get(status_code, "HTTP_ERROR")


def _validation_error_details(exc: RequestValidationError) -> dict:
    errors = []
    for error in exc.errors():
        loc = list(error.get("loc", []))
        field = ".".join(str(item) for item in loc if item not in {"body", "query", "path", "header"}) or None
        errors.append(
            {
                "field": field,
                "message": error.get("msg", "Invalid value"),
                "type": error.get("type", "validation_error"),
                "loc": loc,
            }
        )
    return {"errors": errors}


def error_payload(code: str, error: str, message: str, details: object, trace_id: str) -> dict:
    return {
        "code": code,
        "error": error,
        "message": message,
        "details": details,
        "trace_id": trace_id,
    }


def setup_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        _set_error_context(request, exc.error.code, exc)
        payload = error_payload(exc.error.code, exc.error.message, exc.message, exc.details, _trace_id(request))
        return JSONResponse(status_code=exc.error.status_code, content=payload)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        code = _http_error_code(exc.status_code)
        message = str(exc.detail) if exc.detail is not None else "HTTP error"
        _set_error_context(request, code, exc)
        payload = error_payload(code, message, message, None, _trace_id(request))
        return JSONResponse(status_code=exc.status_code, content=payload, headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        definition = ErrorCatalog.VALIDATION_ERROR
        _set_error_context(request, definition.code, exc)
        payload = error_payload(
            definition.code,
            definition.message,
            definition.message,
            _validation_error_details(exc),
            _trace_id(request),
        )
        return JSONResponse(status_code=definition.status_code, content=payload)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        definition = ErrorCatalog.INTERNAL_ERROR
        _set_error_context(request, definition.code, exc)
        payload = error_payload(
            definition.code,
            definition.message,
            definition.message,
            {"type": exc.__class__.__name__},
            _trace_id(request),
        )
        return JSONResponse(status_code=definition.status_code, content=payload)
