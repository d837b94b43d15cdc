"""Client-side ports.

The view-state and form controller depend only on these abstractions.
The HTTP client, the in-process client, and the CLI adapters implement
them in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping

from catalog.domain.model.product import Product


class ProductService(ABC):
    """Asynchronous access to the product repository, local or remote."""

    @abstractmethod
    async def list_all(self) -> list[Product]:
        """Return every product."""

    @abstractmethod
    async def verify_id(self, product_id: str) -> bool:
        """Return True if the identifier is already taken."""

    @abstractmethod
    async def get_by_id(self, product_id: str) -> Product:
        """Return one product; raises EntityNotFoundError if absent."""

    @abstractmethod
    async def create(self, product: Product) -> Product:
        """Create a product; raises DuplicateIdentifierError on collision."""

    @abstractmethod
    async def update(self, product_id: str, changes: Mapping[str, Any]) -> Product:
        """Merge *changes* into a product; raises EntityNotFoundError if absent."""

    @abstractmethod
    async def delete(self, product_id: str) -> None:
        """Delete a product; raises EntityNotFoundError if absent."""


class Navigator(ABC):

    @abstractmethod
    def to_list(self) -> None:
        """Leave the current screen and show the product list."""

    @abstractmethod
    def to_add(self) -> None:
        """Open the empty product form."""

    @abstractmethod
    def to_edit(self, product_id: str) -> None:
        """Open the product form for an existing product."""


class Notifier(ABC):

    @abstractmethod
    def alert(self, message: str) -> None:
        """Show a blocking message to the user."""
