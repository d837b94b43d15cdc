"""In-memory implementation of ProductRepository.

The catalog lives only as long as the process.  Every public method
takes the instance lock once, so each operation is a single atomic step
against the store.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Iterable, Mapping

from catalog.domain.exceptions import DuplicateIdentifierError, EntityNotFoundError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Not product found with that identifier"
DUPLICATE_MESSAGE = "Duplicate identifier found in the database"


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: Iterable[Product] | None = None) -> None:
        # dicts keep insertion order, which is the listing order
        self._store: dict[str, Product] = {}
        self._lock = threading.Lock()
        for product in products or []:
            self.create(product)

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        with self._lock:
            return list(self._store.values())

    def exists(self, product_id: str) -> bool:
        with self._lock:
            return product_id in self._store

    def get_by_id(self, product_id: str) -> Product:
        with self._lock:
            return self._require(product_id)

    def create(self, product: Product) -> Product:
        with self._lock:
            if product.id in self._store:
                raise DuplicateIdentifierError(DUPLICATE_MESSAGE)
            self._store[product.id] = product
        logger.info("Product %s created", product.id)
        return product

    def update(self, product_id: str, partial: Mapping[str, Any]) -> Product:
        with self._lock:
            merged = self._require(product_id).merged(partial)
            # assignment to an existing key keeps its position
            self._store[product_id] = merged
        logger.info("Product %s updated (%s)", product_id, ", ".join(sorted(partial)))
        return merged

    def delete(self, product_id: str) -> None:
        with self._lock:
            self._require(product_id)
            del self._store[product_id]
        logger.info("Product %s deleted", product_id)

    # --- Internal helpers -----------------------------------------------------

    def _require(self, product_id: str) -> Product:
        product = self._store.get(product_id)
        if product is None:
            raise EntityNotFoundError(NOT_FOUND_MESSAGE)
        return product
