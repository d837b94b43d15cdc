"""Load seed products from a JSON file into a repository."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from catalog.domain.exceptions import DomainException
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


def load_seed(repo: ProductRepository, file_path: Path) -> int:
    """Create every product listed in *file_path*; return how many were added.

    The file holds a JSON array in the API wire form.  Rows that collide
    with an existing ID or fail to parse are skipped with a warning.
    """
    if not file_path.exists():
        logger.warning("Seed file %s not found, starting with an empty catalog", file_path)
        return 0

    raw = json.loads(file_path.read_text(encoding="utf-8"))
    if not isinstance(raw, list):
        raise ValueError(f"Seed file {file_path} must contain a JSON array")

    added = 0
    for item in raw:
        try:
            repo.create(Product.from_dict(item))
        except DomainException as exc:
            logger.warning("Skipping seed row %r: %s", item.get("id"), exc)
            continue
        added += 1

    logger.info("Loaded %d seed product(s) from %s", added, file_path)
    return added
