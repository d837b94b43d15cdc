"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. The concrete in-memory store lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping

from catalog.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in insertion order."""

    @abstractmethod
    def exists(self, product_id: str) -> bool:
        """Return True if a product with this ID is stored."""

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product:
        """Return a product by its ID.

        Raises EntityNotFoundError if absent.
        """

    @abstractmethod
    def create(self, product: Product) -> Product:
        """Append a new product.

        Raises DuplicateIdentifierError if the ID is already taken.
        """

    @abstractmethod
    def update(self, product_id: str, partial: Mapping[str, Any]) -> Product:
        """Shallow-merge *partial* into an existing product and return it.

        Raises EntityNotFoundError if absent.
        """

    @abstractmethod
    def delete(self, product_id: str) -> None:
        """Remove a product.

        Raises EntityNotFoundError if absent.
        """
