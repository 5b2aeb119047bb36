from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv


load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be a number, got {raw!r}")


class Settings:
    """
    Central configuration for Chad Log.

    Values are loaded once from environment variables (with sensible defaults)
    and then exposed via typed properties. A `.env` file in the working
    directory is read first.
    """

    def __init__(self) -> None:
        # Server binding
        self._address = os.getenv("CHAD_LOG_ADDRESS", "127.0.0.1")
        self._port = _env_int("CHAD_LOG_PORT", 3000)
        self._log_level = os.getenv("CHAD_LOG_LOG_LEVEL", "info")

        # Storage: no URL means the in-memory store
        self._database_url = os.getenv("CHAD_LOG_DATABASE_URL") or None
        self._store_timeout = _env_float("CHAD_LOG_STORE_TIMEOUT", 5.0)

        # CLI client target
        self._api_url = os.getenv(
            "CHAD_LOG_API_URL",
            f"http://{self._address}:{self._port}",
        )

    # ------------------------------------------------------------------
    # Server settings
    # ------------------------------------------------------------------

    @property
    def address(self) -> str:
        return self._address

    @property
    def port(self) -> int:
        return self._port

    @property
    def log_level(self) -> str:
        return self._log_level.upper()

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------

    @property
    def database_url(self) -> Optional[str]:
        return self._database_url

    @property
    def store_timeout(self) -> float:
        return self._store_timeout

    # ------------------------------------------------------------------
    # Client
    # ------------------------------------------------------------------

    @property
    def api_url(self) -> str:
        return self._api_url.rstrip("/")


settings = Settings()
