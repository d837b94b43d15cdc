"""Application service: product form controller.

Drives the create/edit lifecycle of a single form:

1. Mode is fixed at construction: EDIT when a route supplied an ID,
   CREATE otherwise.
2. Field changes update an immutable draft; a release-date change also
   sets the revision date in the same step.
3. The identifier is checked for duplicates while the user types
   (CREATE only), through the uniqueness coordinator.
4. ``submit()`` validates locally, then creates or updates through the
   product service and maps a backend conflict onto the ``id`` field.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from enum import Enum
from typing import Callable, Optional

from catalog.application.ports import Navigator, ProductService
from catalog.application.uniqueness_check import (
    CHECK_DEBOUNCE_SECONDS,
    Resolved,
    UniquenessCheckCoordinator,
)
from catalog.domain.exceptions import DomainException, DuplicateIdentifierError
from catalog.domain.model.product import ProductDraft, parse_date
from catalog.domain.service.validation import DUPLICATE_ID_MESSAGE, validate_product

logger = logging.getLogger(__name__)

EDITABLE_TEXT_FIELDS = ("name", "description", "logo")
OPERATION_FAILED_MESSAGE = "The product could not be saved, please try again"


class FormMode(Enum):
    CREATE = "CREATE"
    EDIT = "EDIT"


class SubmitResult(Enum):
    INVALID = "INVALID"
    SAVED = "SAVED"
    CONFLICT = "CONFLICT"
    FAILED = "FAILED"


class ProductFormController:

    def __init__(
        self,
        service: ProductService,
        navigator: Navigator,
        route_id: Optional[str] = None,
        *,
        today: Callable[[], date] = date.today,
        check_delay: float = CHECK_DEBOUNCE_SECONDS,
    ) -> None:
        self._service = service
        self._navigator = navigator
        self._today = today
        self._mode = FormMode.EDIT if route_id else FormMode.CREATE
        self._product_id = route_id or ""

        self.draft = ProductDraft()
        self.errors: dict[str, str] = {}
        self.operation_error: Optional[str] = None
        self.submitting = False

        self._uniqueness = UniquenessCheckCoordinator(
            service,
            self._on_uniqueness_resolved,
            edit_mode=self.is_edit_mode,
            delay=check_delay,
        )

    # --- Read-only state ------------------------------------------------------

    @property
    def mode(self) -> FormMode:
        return self._mode

    @property
    def is_edit_mode(self) -> bool:
        return self._mode is FormMode.EDIT

    @property
    def product_id(self) -> str:
        return self._product_id

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def uniqueness(self) -> UniquenessCheckCoordinator:
        return self._uniqueness

    # --- Lifecycle ------------------------------------------------------------

    async def load(self) -> bool:
        """Fill the draft from the stored product (EDIT only).

        Returns False and navigates back to the list if it cannot be loaded.
        """
        if not self.is_edit_mode:
            return True
        try:
            product = await self._service.get_by_id(self._product_id)
        except DomainException as exc:
            logger.warning("Cannot edit %s: %s", self._product_id, exc)
            self._navigator.to_list()
            return False
        self.draft = ProductDraft.from_product(product)
        return True

    # --- Field changes --------------------------------------------------------

    def on_id_change(self, value: str) -> None:
        if self.is_edit_mode:
            return
        self.draft = replace(self.draft, id=value.strip())
        # the duplicate message belongs to the previous value
        self._clear_duplicate_error()
        self._uniqueness.push(value)

    def on_field_change(self, field: str, value: str) -> None:
        if field not in EDITABLE_TEXT_FIELDS:
            raise ValueError(f"Unknown or read-only field: {field!r}")
        self.draft = replace(self.draft, **{field: value})

    def on_date_release_change(self, value: date | str) -> None:
        self.draft = self.draft.with_release(parse_date(value, "date_release"))

    # --- Validation and submit ------------------------------------------------

    def validate(self) -> bool:
        self.errors = validate_product(self.draft, self._today())
        return not self.errors

    async def submit(self) -> SubmitResult:
        # a late duplicate answer must not land on top of the submit outcome
        self._uniqueness.cancel()
        self.operation_error = None

        if not self.validate():
            return SubmitResult.INVALID

        product = self.draft.to_product()
        self.submitting = True
        try:
            if self.is_edit_mode:
                await self._service.update(self._product_id, product.to_dict())
            else:
                await self._service.create(product)
        except DuplicateIdentifierError:
            self.errors = {**self.errors, "id": DUPLICATE_ID_MESSAGE}
            return SubmitResult.CONFLICT
        except DomainException as exc:
            logger.error("Saving product %s failed: %s", product.id, exc)
            self.operation_error = OPERATION_FAILED_MESSAGE
            return SubmitResult.FAILED
        finally:
            self.submitting = False

        self._navigator.to_list()
        return SubmitResult.SAVED

    def reset(self) -> None:
        self._uniqueness.cancel()
        self.draft = ProductDraft()
        self.errors = {}
        self.operation_error = None

    def back_to_list(self) -> None:
        self._uniqueness.cancel()
        self._navigator.to_list()

    # --- Internal helpers -----------------------------------------------------

    def _on_uniqueness_resolved(self, result: Resolved) -> None:
        if result.is_duplicate and not self.is_edit_mode:
            self.errors = {**self.errors, "id": DUPLICATE_ID_MESSAGE}
        else:
            self._clear_duplicate_error()

    def _clear_duplicate_error(self) -> None:
        if self.errors.get("id") == DUPLICATE_ID_MESSAGE:
            self.errors = {k: v for k, v in self.errors.items() if k != "id"}
