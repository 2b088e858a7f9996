import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from app.api.cors import OriginAllowlistMiddleware
from app.api.errors import (
    invalid_movie_handler,
    movie_not_found_handler,
    request_validation_handler,
)
from app.api.routes import movies
from app.core.config import Settings, configure_logging, load_settings
from app.core.exceptions import InvalidMovieError, MovieNotFoundError
from app.core.movie_store import MovieStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        movie_store = MovieStore()
        movie_store.load_data(settings.data_path)
        app.state.movie_store = movie_store
        yield

    app = FastAPI(
        title="Movies API",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(OriginAllowlistMiddleware, allowed_origins=settings.allowed_origins)

    app.include_router(movies.router, prefix="/movies", tags=["movies"])

    app.add_exception_handler(MovieNotFoundError, movie_not_found_handler)
    app.add_exception_handler(InvalidMovieError, invalid_movie_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    @app.get("/health")
    def health(request: Request) -> Dict[str, Any]:
        return {
            "status": "ok",
            "total_movies": len(request.app.state.movie_store),
        }

    return app


app = create_app()


if __name__ == "__main__":
    settings = load_settings()
    configure_logging(settings.log_level)
    logger.info("Server listening on port %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
