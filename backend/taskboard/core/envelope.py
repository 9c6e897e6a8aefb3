import logging
from typing import Any, Generic, TypeVar

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException

from taskboard.core.validation import ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    data: T
    success: bool = True


def ok(data: Any) -> dict[str, Any]:
    return {"data": data, "success": True}


def failure(status_code: int, data: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"data": jsonable_encoder(data), "success": False})


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return failure(400, {"message": exc.message, "field": exc.field})


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return failure(400, {"message": "Invalid request", "errors": exc.errors()})


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return failure(exc.status_code, {"message": exc.detail})


async def persistence_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Persistence failure on %s %s", request.method, request.url.path, exc_info=exc)
    return failure(400, {"message": "Persistence failure"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, persistence_error_handler)
