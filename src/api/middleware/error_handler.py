"""
Exception handlers - every failure leaves the API as an ErrorResponse body

- RequestValidationError -> 422 VALIDATION_ERROR with per-field entries
- DomainError            -> its own code / status (unknown field, bad value, unknown preset)
- anything else          -> 500 INTERNAL_SERVER_ERROR
"""

import uuid
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api.schemas.error import ErrorDetail, ErrorResponse, ValidationErrorResponse
from models.errors import DomainError
from models.enums import LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.API)


def _field_path(loc) -> str:
    # First element names the request part ("body", "query", ...)
    parts = loc[1:] if len(loc) > 1 else loc
    return ".".join(str(part) for part in parts)


def _error_json(
    status_code: int,
    detail: ErrorDetail,
    request_id: str,
    validation_errors: Optional[List[Dict[str, Any]]] = None
) -> JSONResponse:
    if validation_errors is None:
        body = ErrorResponse(error=detail, request_id=request_id)
    else:
        body = ValidationErrorResponse(error=detail, validation_errors=validation_errors, request_id=request_id)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the three handlers to app"""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        request_id = str(uuid.uuid4())
        errors = [
            {"field": _field_path(error["loc"]), "message": error["msg"], "type": error["type"]}
            for error in exc.errors()
        ]
        log.warn(f"Rejected request body ({len(errors)} errors)", path=request.url.path, request_id=request_id)

        detail = ErrorDetail(
            code="VALIDATION_ERROR",
            message="Request validation failed",
            details={"error_count": len(errors)},
        )
        return _error_json(422, detail, request_id, errors)

    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError):
        request_id = str(uuid.uuid4())
        log.warn(f"{exc.code}: {exc.message}", path=request.url.path, request_id=request_id)

        detail = ErrorDetail(code=exc.code, message=exc.message, details=exc.details)
        return _error_json(exc.status_code, detail, request_id)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        request_id = str(uuid.uuid4())
        log.error(
            f"Unexpected {type(exc).__name__} while serving request",
            path=request.url.path,
            request_id=request_id,
            error=str(exc)
        )

        detail = ErrorDetail(
            code="INTERNAL_SERVER_ERROR",
            message="An unexpected error occurred. Please try again.",
            details={"request_id": request_id},
        )
        return _error_json(status.HTTP_500_INTERNAL_SERVER_ERROR, detail, request_id)
