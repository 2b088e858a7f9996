import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.exceptions import InvalidMovieError, MovieNotFoundError
from app.models.error import FieldError, MessageResponse, ValidationErrorResponse

logger = logging.getLogger(__name__)

async def movie_not_found_handler(request: Request, exc: Exception):
    assert isinstance(exc, MovieNotFoundError)

    logger.info("%s %s -> 404 (%s)", request.method, request.url.path, exc.details)
    return JSONResponse(
        status_code=404,
        content=MessageResponse(message=exc.message).model_dump()
    )

async def invalid_movie_handler(request: Request, exc: Exception):
    assert isinstance(exc, InvalidMovieError)

    return JSONResponse(
        status_code=400,
        content=ValidationErrorResponse(error=exc.details or []).model_dump()
    )

async def request_validation_handler(request: Request, exc: Exception):
    # FastAPI's own body parsing errors, e.g. malformed JSON
    assert isinstance(exc, RequestValidationError)

    errors = [
        FieldError(
            field=".".join(str(part) for part in err.get("loc", ())) or "body",
            message=err.get("msg", "Invalid request"),
            type=err.get("type", "value_error"),
        )
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content=ValidationErrorResponse(error=errors).model_dump()
    )
