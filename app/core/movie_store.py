import json
from copy import deepcopy
import logging
import threading
import time
import uuid
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from app.core.exceptions import MovieNotFoundError
from app.models.movie import Movie

logger = logging.getLogger(__name__)


def load_seed_file(data_path: Path) -> List[Dict[str, Any]]:
    """
    Read the seed dataset. Accepts a JSON array or JSON lines; lines that are
    not valid JSON objects are skipped.
    """
    with open(data_path, "r", encoding="utf-8") as f:
        if data_path.suffix != ".jsonl":
            data = json.load(f)
            if not isinstance(data, list):
                raise ValueError(f"Expected a JSON array at top-level in {data_path}")
            movies = []
            for pos, item in enumerate(data):
                if isinstance(item, dict):
                    movies.append(item)
                else:
                    logger.warning("Item %d is not an object, skipping", pos)
            return movies

        movies = []
        for lineno, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue

            try:
                obj = json.loads(line)
            except json.JSONDecodeError as e:
                logger.warning("Skipping invalid JSON line %d: %s", lineno, e)
                continue

            if isinstance(obj, dict):
                movies.append(obj)
            else:
                logger.warning("Line %d is not an object, skipping", lineno)
        return movies


def ingest_seed(raw_movies: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Keep the seed records that validate as a Movie, dropping the rest and any
    repeated id with a warning.
    """
    movies = []
    seen_ids = set()

    for raw in raw_movies:
        try:
            movie = Movie.model_validate(raw)
        except ValidationError as e:
            logger.warning(
                "Skipping seed movie id=%s: %d invalid field(s)", raw.get("id", "<missing>"), e.error_count()
            )
            continue

        if movie.id in seen_ids:
            logger.warning("Skipping seed movie id=%s: duplicate id", movie.id)
            continue

        seen_ids.add(movie.id)
        movies.append(movie.model_dump())

    return movies


class MovieStore:
    """
    Ordered in-memory collection of movie records.

    FastAPI runs sync endpoints on a thread pool, so every read and every
    mutation goes through one lock. Records handed out are copies.
    """

    def __init__(self, movies: Optional[Iterable[Dict[str, Any]]] = None):
        self._lock = threading.Lock()
        self._movies: List[Dict[str, Any]] = [deepcopy(m) for m in movies or []]

    def load_data(self, data_path: Path) -> None:
        load_start = time.perf_counter()
        movies = ingest_seed(load_seed_file(data_path))
        load_end = time.perf_counter()

        with self._lock:
            self._movies = [deepcopy(m) for m in movies]

        logger.info(
            "Loaded %d movies from %s in %.3fs", len(movies), data_path, load_end - load_start
        )

    def __len__(self) -> int:
        with self._lock:
            return len(self._movies)

    def _index_of(self, movie_id: str) -> int:
        for i, movie in enumerate(self._movies):
            if movie["id"] == movie_id:
                return i
        raise MovieNotFoundError(details={"id": movie_id})

    def list(self, genre: Optional[str] = None) -> List[Dict[str, Any]]:
        with self._lock:
            if not genre:
                return [deepcopy(m) for m in self._movies]

            wanted = genre.lower()
            return [
                deepcopy(m) for m in self._movies
                if any(g.lower() == wanted for g in m.get("genre", []))
            ]

    def get(self, movie_id: str) -> Dict[str, Any]:
        with self._lock:
            return deepcopy(self._movies[self._index_of(movie_id)])

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        with self._lock:
            movie = {"id": str(uuid.uuid4()), **deepcopy(data)}
            self._movies.append(movie)

        logger.info("Created movie id=%s", movie["id"])
        return deepcopy(movie)

    def update(self, movie_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        with self._lock:
            idx = self._index_of(movie_id)
            # id stays fixed whatever the changes carry
            updated = {**self._movies[idx], **deepcopy(changes), "id": movie_id}
            self._movies[idx] = updated

        logger.info("Updated movie id=%s fields=%s", movie_id, sorted(changes))
        return deepcopy(updated)

    def delete(self, movie_id: str) -> Dict[str, Any]:
        with self._lock:
            removed = self._movies.pop(self._index_of(movie_id))

        logger.info("Deleted movie id=%s", movie_id)
        return removed
