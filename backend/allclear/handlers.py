import logging
from typing import Any, Dict, List, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic.alias_generators import to_camel
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from allclear.database import StoreError
from allclear.errors import AppError, ValidationFailed

logger = logging.getLogger("allclear-api")

# Request sections stripped from error locations ("body.location.lat" -> "location.lat")
_LOCATION_ROOTS = {"body", "query", "path", "header"}


def format_validation_errors(errors: Sequence[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Flatten pydantic errors into [{"field": ..., "message": ...}]"""
    formatted = []
    for error in errors:
        loc = list(error.get("loc", ()))
        if loc and loc[0] == "body":
            # Body fields are reported under their JSON key; list indexes stay as they are
            loc = [to_camel(part) if isinstance(part, str) else part for part in loc[1:]]
        elif loc and loc[0] in _LOCATION_ROOTS:
            loc = loc[1:]
        formatted.append({
            "field": ".".join(str(part) for part in loc),
            "message": error.get("msg", "Invalid value"),
        })
    return formatted


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    content: Dict[str, Any] = {"message": exc.message}
    if isinstance(exc, ValidationFailed):
        content["errors"] = exc.errors
    return JSONResponse(status_code=exc.status_code, content=content)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": ValidationFailed.default_message,
            "errors": format_validation_errors(exc.errors()),
        },
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def store_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Storage error on {request.method} {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Map every error onto the JSON {"message": ...} contract"""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
