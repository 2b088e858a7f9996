from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, Query, Request, Response

from app.core.exceptions import InvalidMovieError
from app.core.movie_store import MovieStore
from app.core.validation import validate_movie, validate_partial_movie
from app.models.error import MessageResponse
from app.models.movie import Movie

router = APIRouter()

def get_movie_store(request: Request) -> MovieStore:
    return request.app.state.movie_store

@router.get("", response_model=List[Movie])
def list_movies(
    genre: Optional[str] = Query(None, description="Case-insensitive genre filter"),
    store: MovieStore = Depends(get_movie_store),
):
    return store.list(genre)

@router.get("/{movie_id}", response_model=Movie)
def get_movie(movie_id: str, store: MovieStore = Depends(get_movie_store)):
    return store.get(movie_id)

@router.post("", response_model=Movie, status_code=201)
def create_movie(
    payload: Any = Body(None),
    store: MovieStore = Depends(get_movie_store),
):
    result = validate_movie(payload)
    if not result.success:
        raise InvalidMovieError(details=result.errors)

    return store.create(result.data)

@router.patch("/{movie_id}", response_model=Movie)
def update_movie(
    movie_id: str,
    payload: Any = Body(None),
    store: MovieStore = Depends(get_movie_store),
):
    # validate before lookup: a bad payload is a 400 even for an unknown id
    result = validate_partial_movie(payload)
    if not result.success:
        raise InvalidMovieError(details=result.errors)

    return store.update(movie_id, result.data)

@router.delete("/{movie_id}", response_model=MessageResponse)
def delete_movie(movie_id: str, store: MovieStore = Depends(get_movie_store)):
    store.delete(movie_id)
    return MessageResponse(message="Movie deleted")

@router.options("/{movie_id}")
def movie_preflight(movie_id: str):
    # CORS headers are added by OriginAllowlistMiddleware
    return Response(status_code=200)
