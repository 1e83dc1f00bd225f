"""
Runtime configuration for the snake game backend.

Values come from the environment (a local .env file is loaded first) and
fall back to the defaults the browser frontend expects.
"""

import os
from typing import List

from dotenv import load_dotenv

load_dotenv()

DEFAULT_BOARD_SIZE = 20
DEFAULT_TICK_INTERVAL_MS = 150
DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")
    if value < 1:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def get_board_size() -> int:
    return _int_from_env("SNAKE_BOARD_SIZE", DEFAULT_BOARD_SIZE)


def get_tick_interval_ms() -> int:
    return _int_from_env("SNAKE_TICK_INTERVAL_MS", DEFAULT_TICK_INTERVAL_MS)


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_cors_origins() -> List[str]:
    """
    Allowed origins for the /api/* routes.

    CORS_ALLOWED_ORIGINS is comma-separated; when unset the local dev
    frontend origins are allowed.
    """
    allowed_origins_env = os.getenv("CORS_ALLOWED_ORIGINS")
    if allowed_origins_env:
        return [o.strip() for o in allowed_origins_env.split(",") if o.strip()]
    return list(DEFAULT_CORS_ORIGINS)


def get_flask_debug() -> bool:
    return os.getenv("FLASK_DEBUG", "").strip().lower() in ("1", "true", "yes")
