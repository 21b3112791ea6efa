"""Translate domain exceptions into JSON error responses.

Every error body has the shape of ``ErrorResponse``::

    {"detail": "Category '...' not found", "code": "CATEGORY_NOT_FOUND"}
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from finwise.domain.shared.exceptions import (
    BusinessRuleViolation,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from finwise.presentation.api.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

_CODES_BY_STATUS: dict[int, tuple[ErrorCode, ...]] = {
    status.HTTP_400_BAD_REQUEST: (
        ErrorCode.VALIDATION_ERROR,
        ErrorCode.PARSE_ERROR,
        ErrorCode.INVALID_PARAMETER,
        ErrorCode.INVALID_AMOUNT,
        ErrorCode.INVALID_DATE,
        ErrorCode.INVALID_STATUS,
    ),
    status.HTTP_404_NOT_FOUND: (
        ErrorCode.ENTITY_NOT_FOUND,
        ErrorCode.TRANSACTION_NOT_FOUND,
        ErrorCode.CATEGORY_NOT_FOUND,
        ErrorCode.GOAL_NOT_FOUND,
        ErrorCode.INVESTMENT_NOT_FOUND,
        ErrorCode.ALERT_NOT_FOUND,
    ),
    status.HTTP_422_UNPROCESSABLE_ENTITY: (
        ErrorCode.BUSINESS_RULE_VIOLATION,
        ErrorCode.CATEGORY_TYPE_MISMATCH,
        ErrorCode.CATEGORY_IN_USE,
    ),
    status.HTTP_500_INTERNAL_SERVER_ERROR: (ErrorCode.INTERNAL_ERROR,),
}

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    code: status_code
    for status_code, codes in _CODES_BY_STATUS.items()
    for code in codes
}

# Fallbacks for codes missing from the table, most specific first
_STATUS_BY_EXCEPTION_TYPE: tuple[tuple[type[DomainException], int], ...] = (
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (BusinessRuleViolation, status.HTTP_422_UNPROCESSABLE_ENTITY),
)


def _get_status_for_exception(exc: DomainException) -> int:
    status_code = ERROR_CODE_TO_STATUS.get(exc.code)
    if status_code is not None:
        return status_code
    for exc_type, fallback in _STATUS_BY_EXCEPTION_TYPE:
        if isinstance(exc, exc_type):
            return fallback
    return status.HTTP_400_BAD_REQUEST


def _error_json(status_code: int, detail: str, code: ErrorCode) -> JSONResponse:
    body = ErrorResponse(detail=detail, code=code.value)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def setup_exception_handlers(app: FastAPI) -> None:
    """Install the domain and catch-all handlers on ``app``."""

    @app.exception_handler(DomainException)
    async def handle_domain_exception(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        status_code = _get_status_for_exception(exc)
        logger.warning(
            "%s %s -> %d %s: %s %s",
            request.method,
            request.url.path,
            status_code,
            exc.code.value,
            exc.message,
            exc.details,
        )
        return _error_json(status_code, exc.message, exc.code)

    @app.exception_handler(Exception)
    async def handle_unexpected_exception(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        # Internals stay in the log, never in the body
        logger.exception(
            "Unhandled %s on %s %s",
            type(exc).__name__,
            request.method,
            request.url.path,
        )
        return _error_json(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An internal error occurred",
            ErrorCode.INTERNAL_ERROR,
        )
