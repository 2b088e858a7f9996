import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

DEFAULT_PORT = 1234
DEFAULT_HOST = "127.0.0.1"
DEFAULT_ALLOWED_ORIGINS = [
    "http://localhost:8080",
    "http://localhost:1234",
    "http://movies.com",
]
DEFAULT_DATA_PATH = Path(__file__).resolve().parents[1] / "data" / "movies.json"


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _parse_origins() -> List[str]:
    raw = os.getenv("ALLOWED_ORIGINS")
    if raw is None:
        return DEFAULT_ALLOWED_ORIGINS[:]
    return [o.strip().rstrip("/") for o in raw.split(",") if o.strip()]


@dataclass
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    allowed_origins: List[str] = field(default_factory=lambda: DEFAULT_ALLOWED_ORIGINS[:])
    data_path: Path = DEFAULT_DATA_PATH
    log_level: str = "INFO"


def load_settings() -> Settings:
    return Settings(
        host=os.getenv("HOST", DEFAULT_HOST),
        port=_env_int("PORT", DEFAULT_PORT),
        allowed_origins=_parse_origins(),
        data_path=Path(os.getenv("MOVIES_DATA_PATH", str(DEFAULT_DATA_PATH))),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
