"""Application service: product list view-state.

Holds the raw inputs of the list screen (loaded products, search term,
page size, current page, menu and delete-dialog state).  Everything the
screen shows is derived from those inputs on access, so nothing can go
stale.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

from catalog.application.debounce import Debouncer
from catalog.application.ports import Navigator, Notifier, ProductService
from catalog.domain.exceptions import DomainException
from catalog.domain.model.product import Product

logger = logging.getLogger(__name__)

SEARCH_DEBOUNCE_SECONDS = 0.3
DEFAULT_PAGE_SIZE = 10
PAGE_SIZE_OPTIONS = (5, 10, 20)
DELETE_FAILED_MESSAGE = "The product could not be deleted"


# --- Pure derivations ---------------------------------------------------------


def filter_products(products: Sequence[Product], term: str) -> list[Product]:
    needle = term.strip().lower()
    if not needle:
        return list(products)
    return [
        p
        for p in products
        if needle in p.id.lower()
        or needle in p.name.lower()
        or needle in p.description.lower()
    ]


def count_pages(total: int, page_size: int) -> int:
    if page_size <= 0:
        return 0
    return math.ceil(total / page_size)


def page_slice(items: Sequence[Product], page: int, page_size: int) -> list[Product]:
    start = (page - 1) * page_size
    return list(items[start:start + page_size])


# --- View-state ---------------------------------------------------------------


class ProductListState:

    def __init__(
        self,
        service: ProductService,
        navigator: Navigator,
        notifier: Notifier,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        search_delay: float = SEARCH_DEBOUNCE_SECONDS,
    ) -> None:
        self._service = service
        self._navigator = navigator
        self._notifier = notifier
        self._search = Debouncer(search_delay)
        self._last_search: Optional[str] = None

        self.products: list[Product] = []
        self.loading = False
        self.error = False
        self.search_term = ""
        self.page_size = page_size
        self.current_page = 1
        self.open_menu_id: Optional[str] = None
        self.delete_candidate: Optional[str] = None

    # --- Derived state --------------------------------------------------------

    @property
    def filtered_products(self) -> list[Product]:
        return filter_products(self.products, self.search_term)

    @property
    def total_results(self) -> int:
        return len(self.filtered_products)

    @property
    def total_pages(self) -> int:
        return count_pages(self.total_results, self.page_size)

    @property
    def paginated_products(self) -> list[Product]:
        return page_slice(self.filtered_products, self.current_page, self.page_size)

    @property
    def page_numbers(self) -> list[int]:
        return list(range(1, self.total_pages + 1))

    # --- Loading --------------------------------------------------------------

    async def load(self) -> None:
        self.loading = True
        self.error = False
        try:
            self.products = await self._service.list_all()
        except DomainException as exc:
            logger.error("Could not load products: %s", exc)
            self.error = True
        finally:
            self.loading = False

    # --- Search and pagination ------------------------------------------------

    def on_search_change(self, value: str) -> None:
        """Raw keystroke input; applied after the debounce window."""
        self._search.schedule(lambda: self._apply_debounced_search(value))

    async def wait_for_search(self) -> None:
        await self._search.wait()

    def apply_search(self, term: str) -> None:
        if term.strip().lower() != self.search_term.strip().lower():
            self.current_page = 1
        self.search_term = term

    def set_page_size(self, page_size: int) -> None:
        if page_size <= 0:
            raise ValueError(f"Page size must be positive, got {page_size}")
        self.page_size = page_size
        self.current_page = 1

    def go_to_page(self, page: int) -> None:
        if 1 <= page <= self.total_pages:
            self.current_page = page

    # --- Row actions ----------------------------------------------------------

    def toggle_menu(self, product_id: str) -> None:
        self.open_menu_id = None if self.open_menu_id == product_id else product_id

    def open_delete(self, product_id: str) -> None:
        self.open_menu_id = None
        self.delete_candidate = product_id

    def cancel_delete(self) -> None:
        self.open_menu_id = None
        self.delete_candidate = None

    async def confirm_delete(self) -> bool:
        """Delete the candidate remotely; drop it locally only on success."""
        product_id = self.delete_candidate
        self.cancel_delete()
        if product_id is None:
            return False

        try:
            await self._service.delete(product_id)
        except DomainException as exc:
            logger.error("Delete of %s failed: %s", product_id, exc)
            self._notifier.alert(f"{DELETE_FAILED_MESSAGE}: {exc}")
            return False

        self.products = [p for p in self.products if p.id != product_id]
        return True

    def on_add(self) -> None:
        self._navigator.to_add()

    def on_edit(self, product_id: str) -> None:
        self.open_menu_id = None
        self._navigator.to_edit(product_id)

    # --- Internal helpers -----------------------------------------------------

    async def _apply_debounced_search(self, value: str) -> None:
        if value == self._last_search:
            return
        self._last_search = value
        self.apply_search(value)
