"""Product aggregate.

A product is a financial offering (card, account, loan, insurance) in
the catalog.  Its identifier is chosen by the caller and never changes;
everything else may be overwritten by an update.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from datetime import date
from typing import Any, Mapping

from catalog.domain.exceptions import ValidationError

PRODUCT_FIELDS = (
    "id",
    "name",
    "description",
    "logo",
    "date_release",
    "date_revision",
)
DATE_FIELDS = ("date_release", "date_revision")


def revision_date_for(release: date) -> date:
    """Return the revision date for a release: same month/day, one year on.

    February 29 falls back to February 28 when the next year is not a
    leap year.
    """
    try:
        return release.replace(year=release.year + 1)
    except ValueError:
        return release.replace(year=release.year + 1, day=28)


def parse_date(value: date | str, field: str) -> date:
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError as exc:
        raise ValidationError({field: f"Invalid date: {value!r}"}) from exc


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    Frozen: updates produce a new instance via ``merged()`` so the
    repository can swap records in a single step.
    """

    id: str
    name: str
    description: str
    logo: str
    date_release: date
    date_revision: date

    def merged(self, partial: Mapping[str, Any]) -> Product:
        """Shallow merge: each known field present in *partial* replaces ours.

        ``id`` is ignored, identifiers are immutable.
        """
        changes: dict[str, Any] = {}
        for field in PRODUCT_FIELDS:
            if field == "id" or field not in partial:
                continue
            value = partial[field]
            if field in DATE_FIELDS:
                value = parse_date(value, field)
            changes[field] = value
        return replace(self, **changes)

    # --- Serialization --------------------------------------------------------

    def to_dict(self) -> dict[str, str]:
        raw = asdict(self)
        for field in DATE_FIELDS:
            raw[field] = raw[field].isoformat()
        return raw

    @staticmethod
    def from_dict(raw: Mapping[str, Any]) -> Product:
        missing = [f for f in PRODUCT_FIELDS if f not in raw]
        if missing:
            raise ValidationError({f: "This field is required" for f in missing})
        return Product(
            id=str(raw["id"]),
            name=str(raw["name"]),
            description=str(raw["description"]),
            logo=str(raw["logo"]),
            date_release=parse_date(raw["date_release"], "date_release"),
            date_revision=parse_date(raw["date_revision"], "date_revision"),
        )


@dataclass(frozen=True)
class ProductDraft:
    """The editable candidate behind the product form.

    Any field may be empty: ``""`` for text and ``None`` for dates.
    """

    id: str = ""
    name: str = ""
    description: str = ""
    logo: str = ""
    date_release: date | None = None
    date_revision: date | None = None

    def with_release(self, release: date) -> ProductDraft:
        """Set the release date and its derived revision date together."""
        return replace(
            self, date_release=release, date_revision=revision_date_for(release)
        )

    def to_product(self) -> Product:
        if self.date_release is None or self.date_revision is None:
            raise ValidationError({"date_release": "Required"})
        return Product(
            id=self.id,
            name=self.name,
            description=self.description,
            logo=self.logo,
            date_release=self.date_release,
            date_revision=self.date_revision,
        )

    @staticmethod
    def from_product(product: Product) -> ProductDraft:
        return ProductDraft(
            id=product.id,
            name=product.name,
            description=product.description,
            logo=product.logo,
            date_release=product.date_release,
            date_revision=product.date_revision,
        )
