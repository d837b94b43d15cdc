"""Composition root: wires concrete implementations to the ports.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI

from catalog.infrastructure.api.app import create_app
from catalog.infrastructure.client.http_product_service import HttpProductService
from catalog.infrastructure.config import Settings, configure_logging
from catalog.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from catalog.infrastructure.persistence.seed import load_seed

logger = logging.getLogger(__name__)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"
DEFAULT_SEED_FILE = _DATA_DIR / "products.json"

# One store per process; the API serves whatever this holds.
_repository: Optional[InMemoryProductRepository] = None


def settings() -> Settings:
    return Settings.from_env()


def product_repository(config: Settings) -> InMemoryProductRepository:
    global _repository
    if _repository is None:
        _repository = InMemoryProductRepository()
        if config.seed_file is not None:
            load_seed(_repository, config.seed_file)
    return _repository


def api_app(config: Optional[Settings] = None) -> FastAPI:
    """ASGI factory: ``uvicorn catalog.infrastructure.bootstrap:api_app --factory``."""
    config = config or settings()
    configure_logging(config.log_level)
    return create_app(product_repository(config), config)


def product_service(config: Settings) -> HttpProductService:
    return HttpProductService(config.api_url, timeout=config.http_timeout)
