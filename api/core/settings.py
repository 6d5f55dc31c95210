"""
Environment-driven settings.

Values are read on every call so tests can tweak `os.environ` freely.
Malformed numbers fall back to the default instead of failing startup.
"""

from __future__ import annotations

import os

DEFAULT_SERVICE_ADDRESS = "http://localhost:8000"


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def database_url() -> str:
    return os.environ.get("DATABASE_URL", "").strip()


def service_address() -> str:
    """
    Externally visible base address, used to build catalog URLs.
    """
    raw = os.environ.get("SERVICE_ADDRESS", DEFAULT_SERVICE_ADDRESS).strip() or DEFAULT_SERVICE_ADDRESS
    return raw.rstrip("/")


def pool_min_size() -> int:
    return _env_int("DB_POOL_MIN_SIZE", 1)


def pool_max_size() -> int:
    return max(pool_min_size(), _env_int("DB_POOL_MAX_SIZE", 5))


def command_timeout_s() -> float:
    return _env_float("DB_COMMAND_TIMEOUT_S", 30.0)


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def sequence_error_policy() -> str:
    return os.environ.get("SEQUENCE_ERROR_POLICY", "raise").strip().lower() or "raise"
