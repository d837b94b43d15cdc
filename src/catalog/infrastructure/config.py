"""Runtime configuration.

Values come from the environment, after ``.env`` is loaded if present.
Invalid values fail fast with a ConfigurationError.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


class ConfigurationError(Exception):
    """Raised when a configuration value is missing or invalid."""


def _get_int(key: str, default: int) -> int:
    raw = os.environ.get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"'{key}' must be an integer, got {raw!r}") from exc


def _get_float(key: str, default: float) -> float:
    raw = os.environ.get(key)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"'{key}' must be a number, got {raw!r}") from exc


@dataclass(frozen=True)
class Settings:
    api_url: str = "http://localhost:3002/bp"
    host: str = "127.0.0.1"
    port: int = 3002
    route_prefix: str = "/bp"
    cors_origins: tuple[str, ...] = ("http://localhost:4200",)
    seed_file: Path | None = None
    log_level: str = "INFO"
    http_timeout: float = 10.0

    @staticmethod
    def from_env() -> Settings:
        load_dotenv()

        origins = os.environ.get("CATALOG_CORS_ORIGINS", "http://localhost:4200")
        seed = os.environ.get("CATALOG_SEED_FILE")
        log_level = os.environ.get("CATALOG_LOG_LEVEL", "INFO").upper()
        if log_level not in logging.getLevelNamesMapping():
            raise ConfigurationError(f"Unknown log level {log_level!r}")

        return Settings(
            api_url=os.environ.get("CATALOG_API_URL", "http://localhost:3002/bp").rstrip("/"),
            host=os.environ.get("CATALOG_HOST", "127.0.0.1"),
            port=_get_int("CATALOG_PORT", 3002),
            route_prefix=os.environ.get("CATALOG_ROUTE_PREFIX", "/bp").rstrip("/"),
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
            seed_file=Path(seed) if seed else None,
            log_level=log_level,
            http_timeout=_get_float("CATALOG_HTTP_TIMEOUT", 10.0),
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
