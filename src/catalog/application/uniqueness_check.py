"""Application service: debounced identifier uniqueness check.

Drives the "this ID already exists" indicator on the product form.
Rapid input collapses into one remote check for the last value, and
only the answer for the most recently pushed value may become visible:
every push bumps a generation token and a response carrying an older
token is dropped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from catalog.application.debounce import Debouncer
from catalog.application.ports import ProductService
from catalog.domain.exceptions import DomainException

logger = logging.getLogger(__name__)

CHECK_DEBOUNCE_SECONDS = 0.5
MIN_CHECK_LENGTH = 5


@dataclass(frozen=True)
class Idle:
    """No check scheduled or in flight."""


@dataclass(frozen=True)
class Pending:
    product_id: str


@dataclass(frozen=True)
class Resolved:
    product_id: str
    is_duplicate: bool


CheckState = Union[Idle, Pending, Resolved]


class UniquenessCheckCoordinator:

    def __init__(
        self,
        service: ProductService,
        on_resolved: Optional[Callable[[Resolved], None]] = None,
        *,
        edit_mode: bool = False,
        delay: float = CHECK_DEBOUNCE_SECONDS,
        min_length: int = MIN_CHECK_LENGTH,
    ) -> None:
        self._service = service
        self._on_resolved = on_resolved
        self._edit_mode = edit_mode
        self._min_length = min_length
        self._debouncer = Debouncer(delay)
        self._generation = 0
        self.state: CheckState = Idle()

    @property
    def edit_mode(self) -> bool:
        return self._edit_mode

    @property
    def generation(self) -> int:
        return self._generation

    def set_edit_mode(self, edit_mode: bool) -> None:
        """Switch modes; whatever was pending belongs to the old mode."""
        self.cancel()
        self._edit_mode = edit_mode

    def push(self, value: str) -> None:
        """Feed the latest identifier value (call on every change)."""
        self._generation += 1
        token = self._generation
        self._debouncer.cancel()

        if self._edit_mode:
            self._resolve(Resolved(value, False))
            return

        if len(value) < self._min_length:
            self.state = Idle()
            return

        self.state = Pending(value)
        self._debouncer.schedule(lambda: self._check(value, token))

    def cancel(self) -> None:
        """Abandon any scheduled or in-flight check."""
        self._generation += 1
        self._debouncer.cancel()
        self.state = Idle()

    async def wait(self) -> None:
        await self._debouncer.wait()

    # --- Internal helpers -----------------------------------------------------

    async def _check(self, value: str, token: int) -> None:
        if token != self._generation:
            return
        try:
            exists = await self._service.verify_id(value)
        except DomainException as exc:
            if token == self._generation:
                logger.warning("Uniqueness check for %r failed: %s", value, exc)
                self.state = Idle()
            return

        if token != self._generation:
            logger.debug("Discarding stale uniqueness result for %r", value)
            return
        self._resolve(Resolved(value, bool(exists)))

    def _resolve(self, result: Resolved) -> None:
        self.state = result
        if self._on_resolved is not None:
            self._on_resolved(result)
