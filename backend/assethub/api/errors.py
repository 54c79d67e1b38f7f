"""Utilities for translating domain errors to HTTP responses."""

import logging

from fastapi import HTTPException, status

from assethub.domain.exceptions import (
    ConflictError,
    DomainError,
    ErrorLevel,
    NotFoundError,
    ValidationError,
)

_LOG_LEVELS = {
    ErrorLevel.DEBUG: logging.DEBUG,
    ErrorLevel.INFO: logging.INFO,
    ErrorLevel.WARNING: logging.WARNING,
    ErrorLevel.ERROR: logging.ERROR,
    ErrorLevel.CRITICAL: logging.CRITICAL,
}


def to_http(exc: DomainError) -> HTTPException:
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)
    if isinstance(exc, ConflictError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=exc.message)
    if isinstance(exc, ValidationError):
        return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=exc.message)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)


def error_body(exc: DomainError) -> dict:
    """JSON document returned for a domain error."""
    return {"detail": exc.message, "code": exc.code.value, "level": exc.level.value}


def log_level(exc: DomainError) -> int:
    return _LOG_LEVELS.get(exc.level, logging.ERROR)
