"""Error handling and response models."""
from typing import Any, List, Optional, Union

import httpx
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from domain.order import ValidationError as DomainValidationError
from infrastructure.config import get_service_name
from infrastructure.logging import get_logger


logger = get_logger(get_service_name())


class ErrorResponse(BaseModel):
    """Standard error response format."""
    status_code: int
    detail: Union[str, List[Any]]
    error_type: Optional[str] = None

    def to_response(self) -> JSONResponse:
        return JSONResponse(
            status_code=self.status_code,
            content=self.model_dump(exclude={"status_code"}),
        )


def _error(status_code: int, detail: Union[str, List[Any]], error_type: str) -> JSONResponse:
    return ErrorResponse(status_code=status_code, detail=detail, error_type=error_type).to_response()


async def validation_error_handler(request: Request, exc: DomainValidationError) -> JSONResponse:
    """Order rules the cart failed: 400 with the domain message."""
    logger.warning(f"Validation error: {exc}", path=request.url.path, error=str(exc))
    return _error(status.HTTP_400_BAD_REQUEST, str(exc), "ValidationError")


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Request validation failed", path=request.url.path, errors=exc.errors())
    return _error(status.HTTP_400_BAD_REQUEST, jsonable_errors(exc), "RequestValidationError")


async def upstream_error_handler(request: Request, exc: httpx.HTTPError) -> JSONResponse:
    """The order API failed or was unreachable: 502, no retry."""
    logger.error(
        f"Upstream error: {type(exc).__name__}",
        path=request.url.path,
        upstream_url=str(exc.request.url) if _has_request(exc) else None,
        exc_info=True,
    )
    return _error(status.HTTP_502_BAD_GATEWAY, "Upstream service error", "UpstreamError")


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle generic exceptions with 500 status without exposing internals."""
    logger.error(f"Internal server error: {type(exc).__name__}", path=request.url.path, exc_info=True)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", "InternalServerError")


def jsonable_errors(exc: RequestValidationError) -> list:
    return [{k: v for k, v in error.items() if k != "ctx"} for error in exc.errors()]


def _has_request(exc: httpx.HTTPError) -> bool:
    try:
        exc.request
    except RuntimeError:
        return False
    return True
