"""Domain service: field validation for product candidates.

Pure and side-effect free: the same candidate and ``today`` always give
the same error mapping.  Every rule runs on every call, so one pass
reports all the problems a submission has.
"""

from __future__ import annotations

from datetime import date, datetime

from catalog.domain.model.product import Product, ProductDraft

ID_LENGTH = (3, 10)
NAME_LENGTH = (5, 100)
DESCRIPTION_LENGTH = (10, 200)

ID_LENGTH_MESSAGE = "Required, must be between 3 and 10 characters"
NAME_LENGTH_MESSAGE = "Required, must be between 5 and 100 characters"
DESCRIPTION_LENGTH_MESSAGE = "Required, must be between 10 and 200 characters"
REQUIRED_MESSAGE = "This field is required"
DATE_REQUIRED_MESSAGE = "Required"
DATE_TOO_EARLY_MESSAGE = "The date must be today or later"
DUPLICATE_ID_MESSAGE = "This ID already exists"


def _length_ok(value: str, bounds: tuple[int, int]) -> bool:
    low, high = bounds
    return bool(value) and low <= len(value) <= high


def _as_date(value: date | datetime) -> date:
    # datetime is a date subclass; drop the time of day
    if isinstance(value, datetime):
        return value.date()
    return value


def validate_product(candidate: Product | ProductDraft, today: date) -> dict[str, str]:
    """Return a mapping of field name to error message; empty means valid."""
    errors: dict[str, str] = {}

    if not _length_ok(candidate.id, ID_LENGTH):
        errors["id"] = ID_LENGTH_MESSAGE
    if not _length_ok(candidate.name, NAME_LENGTH):
        errors["name"] = NAME_LENGTH_MESSAGE
    if not _length_ok(candidate.description, DESCRIPTION_LENGTH):
        errors["description"] = DESCRIPTION_LENGTH_MESSAGE
    if not candidate.logo:
        errors["logo"] = REQUIRED_MESSAGE

    if candidate.date_release is None:
        errors["date_release"] = DATE_REQUIRED_MESSAGE
    elif _as_date(candidate.date_release) < _as_date(today):
        errors["date_release"] = DATE_TOO_EARLY_MESSAGE

    if candidate.date_revision is None:
        errors["date_revision"] = DATE_REQUIRED_MESSAGE

    return errors
