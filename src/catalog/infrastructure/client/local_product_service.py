"""In-process implementation of the ProductService port.

Lets the list and form drive a repository living in the same process,
without going through HTTP.
"""

from __future__ import annotations

from typing import Any, Mapping

from catalog.application.ports import ProductService
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


class LocalProductService(ProductService):

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    async def list_all(self) -> list[Product]:
        return self._product_repo.list_all()

    async def verify_id(self, product_id: str) -> bool:
        return self._product_repo.exists(product_id)

    async def get_by_id(self, product_id: str) -> Product:
        return self._product_repo.get_by_id(product_id)

    async def create(self, product: Product) -> Product:
        return self._product_repo.create(product)

    async def update(self, product_id: str, changes: Mapping[str, Any]) -> Product:
        return self._product_repo.update(product_id, changes)

    async def delete(self, product_id: str) -> None:
        self._product_repo.delete(product_id)
