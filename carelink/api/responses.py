"""
HTTP adapter for use case results.

Use cases return ``Result`` values; this module is the single place where a
``DomainError`` becomes an HTTP status. Routes call ``result_to_response``
and the handlers registered by ``register_exception_handlers`` catch
domain errors that were raised instead of returned (``RepositoryError``).
"""

from typing import Any

from fastapi import FastAPI, HTTPException, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from carelink.core.observability import get_logger
from carelink.domain.shared import DomainError, ErrorType, Result

logger = get_logger(__name__)

STATUS_BY_ERROR_TYPE: dict[ErrorType, int] = {
    ErrorType.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorType.BUSINESS_RULE: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorType.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorType.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorType.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorType.REPOSITORY: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(error: DomainError) -> int:
    return STATUS_BY_ERROR_TYPE.get(
        error.error_type, status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def result_to_response(
    result: Result[Any, DomainError], success_status: int = status.HTTP_200_OK
) -> Response:
    """
    Turn a use case result into an HTTP response.

    Args:
        result: Outcome of a use case
        success_status: Status used when the result succeeded

    Returns:
        JSON response with the encoded payload, or an empty response when
        the use case produced no payload

    Raises:
        HTTPException: With the mapped status and the error as ``detail``
    """
    if result.is_failure:
        error = result.error
        raise HTTPException(status_code=status_for(error), detail=error.to_dict())

    if result.value is None:
        return Response(status_code=success_status)
    return JSONResponse(
        status_code=success_status, content=jsonable_encoder(result.value)
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Answer raised domain errors with the same status mapping as results."""

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        status_code = status_for(exc)
        if status_code >= 500:
            logger.error(
                "Unhandled domain error",
                path=request.url.path,
                method=request.method,
                error_type=exc.error_type.value,
                code=exc.code,
                exc_info=exc,
            )
        else:
            logger.warning(
                "Domain error raised",
                path=request.url.path,
                method=request.method,
                code=exc.code,
            )
        return JSONResponse(status_code=status_code, content={"detail": exc.to_dict()})
