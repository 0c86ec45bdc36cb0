from typing import Dict, Optional

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse

from product_catalog.config.logger_config import log
from product_catalog.interfaces.http.schemas import ErrorCode, ErrorResponse


class CatalogHTTPException(HTTPException):
    """HTTPException rendered as an ErrorResponse body."""

    def __init__(
        self,
        status_code: int,
        code: ErrorCode,
        message: str,
        headers: Optional[Dict[str, str]] = None,
    ):
        super().__init__(status_code=status_code, detail=message, headers=headers)
        self.code = code


def error_body(request: Request, code: ErrorCode, message: str) -> dict:
    response = ErrorResponse(message=message, code=code, path=request.url.path)
    return response.model_dump(mode="json", by_alias=True)


async def catalog_exception_handler(
    request: Request, exc: CatalogHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(request, exc.code, exc.detail),
        headers=exc.headers,
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    log.exception("Unhandled error", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(
            request, ErrorCode.INTERNAL_SERVER_ERROR, "An unexpected error occurred"
        ),
    )
