# eduassess/core/errors.py
"""
Error envelope shared by every endpoint.

All failures leave the API as ``{"success": false, "message": ..., ...}``
with a standard HTTP status code.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ScoringError(Exception):
    """The assessment cannot be scored (e.g. it has no questions)."""


class ValidationFailed(Exception):
    """Field-level validation errors raised from service code."""

    def __init__(self, errors: dict[str, str], message: str = "Validation failed"):
        super().__init__(message)
        self.errors = errors
        self.message = message


def error_body(message: str, **extra) -> dict:
    body = {"success": False, "message": message}
    body.update({k: v for k, v in extra.items() if v is not None})
    return body


def _field_name(loc: tuple) -> str:
    # loc looks like ("body", "email") or ("body", "questions", 0, "options")
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts) or "request"


def _validation_message(field: str, err: dict) -> str:
    if err.get("type") == "missing":
        return f"{field.split('.')[-1].capitalize()} is required"
    msg = err.get("msg", "Invalid value")
    # pydantic prefixes messages raised from validators with "Value error, "
    return msg.removeprefix("Value error, ")


def validation_errors_to_fields(errors: list[dict]) -> dict[str, str]:
    fields: dict[str, str] = {}
    for err in errors:
        field = _field_name(tuple(err.get("loc", ())))
        fields.setdefault(field, _validation_message(field, err))
    return fields


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = exc.detail
    if isinstance(detail, dict):
        body = {"success": False, **detail}
    else:
        body = error_body(str(detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(body),
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError):
    fields = validation_errors_to_fields(exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Validation failed", errors=fields),
    )


async def validation_failed_handler(request: Request, exc: ValidationFailed):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(exc.message, errors=exc.errors),
    )


async def scoring_error_handler(request: Request, exc: ScoringError):
    logger.warning(f"Scoring failed on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Assessment cannot be scored", error=str(exc)),
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(f"Database error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Database error", error=str(exc)),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unexpected error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error", error=str(exc)),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationFailed, validation_failed_handler)
    app.add_exception_handler(ScoringError, scoring_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
