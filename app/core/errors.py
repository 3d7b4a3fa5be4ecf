import logging

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger("app")

# Record lookups that come back empty on the user endpoints surface this text
RECORD_NOT_FOUND = "record not found"


def storage_error(e: SQLAlchemyError) -> HTTPException:
    """Turn a database failure into a 500 carrying the store's message"""
    logger.error(f"Database error: {e}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=str(getattr(e, "orig", None) or e),
    )


def _format_errors(errors, skip: int = 0) -> str:
    messages = []
    for error in errors:
        loc = ".".join(str(part) for part in error.get("loc", ())[skip:])
        msg = error.get("msg", "invalid value")
        messages.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(messages) or "invalid request"


def decode_error(exc: ValidationError) -> HTTPException:
    """400 for a request body validated inside the handler"""
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=_format_errors(exc.errors()),
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Drop the leading "body"/"path"/"query" marker
    message = _format_errors(exc.errors(), skip=1)
    logger.info(f"Rejected request to {request.url.path}: {message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": message},
    )
