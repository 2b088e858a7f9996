import json

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app

SEED_MOVIES = [
    {
        "id": "11111111-1111-4111-8111-111111111111",
        "title": "The Dark Knight",
        "year": 2008,
        "director": "Christopher Nolan",
        "duration": 152,
        "poster": "https://example.com/dark-knight.jpg",
        "genre": ["Action", "Crime", "Drama"],
        "rate": 9.0
    },
    {
        "id": "22222222-2222-4222-8222-222222222222",
        "title": "The Shawshank Redemption",
        "year": 1994,
        "director": "Frank Darabont",
        "duration": 142,
        "poster": "https://example.com/shawshank.jpg",
        "genre": ["Drama"],
        "rate": 9.3
    },
    {
        "id": "33333333-3333-4333-8333-333333333333",
        "title": "The Matrix",
        "year": 1999,
        "director": "Lana Wachowski",
        "duration": 136,
        "poster": "https://example.com/matrix.jpg",
        "genre": ["Action", "Sci-Fi"],
        "rate": 8.7
    },
]

ALLOWED_ORIGINS = ["http://localhost:8080", "http://movies.com"]


@pytest.fixture
def seed_movies():
    return [dict(m, genre=list(m["genre"])) for m in SEED_MOVIES]


@pytest.fixture
def seed_path(tmp_path, seed_movies):
    path = tmp_path / "movies.json"
    path.write_text(json.dumps(seed_movies), encoding="utf-8")
    return path


@pytest.fixture
def client(seed_path):
    settings = Settings(allowed_origins=ALLOWED_ORIGINS, data_path=seed_path)
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def dune():
    return {
        "title": "Dune",
        "year": 2021,
        "director": "Denis Villeneuve",
        "duration": 155,
        "poster": "http://x/d.jpg",
        "genre": ["Sci-Fi"],
        "rate": 8
    }
