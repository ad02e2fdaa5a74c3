"""Runtime configuration defaults for the data store, logging and retries."""

from __future__ import annotations

import os

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


SUPABASE_URL = os.environ.get("FUEGO_SUPABASE_URL", "http://localhost:54321")
SUPABASE_KEY = os.environ.get("FUEGO_SUPABASE_KEY", "")

REQUEST_TIMEOUT_SECONDS = float(os.environ.get("FUEGO_REQUEST_TIMEOUT", "15"))
MAX_RETRIES = 3
RETRY_DELAY_SECONDS = 1.0

LOG_PATH = os.environ.get("FUEGO_LOG_PATH", "logs/fuego-admin.log")
DEBUG = _env_flag("FUEGO_DEBUG")
