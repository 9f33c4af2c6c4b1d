"""Runtime configuration for recurdate.

Values come from the environment (optionally via a local `.env` file) and fall back
to the defaults in `recurdate.models.constants`.
"""

import os
from dotenv import load_dotenv

from recurdate.models.constants import DEFAULT_MAX_ITERATIONS, DEFAULT_PREVIEW_LIMIT

load_dotenv()


def _int_env(name: str, default: int, *, minimum: int = 1) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


MAX_ITERATIONS = _int_env("RECURDATE_MAX_ITERATIONS", DEFAULT_MAX_ITERATIONS)
PREVIEW_LIMIT = _int_env("RECURDATE_PREVIEW_LIMIT", DEFAULT_PREVIEW_LIMIT)

HOST = os.getenv("RECURDATE_HOST", "0.0.0.0")
PORT = _int_env("RECURDATE_PORT", 8000)

DEBUG = os.getenv("DEBUG", "False").lower() == "true"
LOG_LEVEL = "debug" if DEBUG else os.getenv("RECURDATE_LOG_LEVEL", "info").lower()
