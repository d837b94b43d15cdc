"""Unit tests for the Product aggregate and draft."""

from datetime import date

import pytest

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import (
    Product,
    ProductDraft,
    parse_date,
    revision_date_for,
)
from tests.fakes import make_product


# ── Revision date ────────────────────────────────────────────────────────────


class TestRevisionDate:

    def test_same_month_and_day_next_year(self):
        assert revision_date_for(date(2025, 12, 1)) == date(2026, 12, 1)

    def test_leap_day_falls_back_to_feb_28(self):
        assert revision_date_for(date(2024, 2, 29)) == date(2025, 2, 28)

    def test_feb_28_stays_feb_28(self):
        assert revision_date_for(date(2027, 2, 28)) == date(2028, 2, 28)


# ── Merge ────────────────────────────────────────────────────────────────────


class TestMerge:

    def test_present_fields_replace(self):
        product = make_product()
        merged = product.merged({"name": "Gold Credit Card"})
        assert merged.name == "Gold Credit Card"
        assert merged.description == product.description
        assert merged.date_release == product.date_release

    def test_empty_partial_keeps_everything(self):
        product = make_product()
        assert product.merged({}) == product

    def test_id_is_immutable(self):
        product = make_product("trj-crd")
        assert product.merged({"id": "other"}).id == "trj-crd"

    def test_dates_accept_iso_strings(self):
        merged = make_product().merged({"date_release": "2030-05-01"})
        assert merged.date_release == date(2030, 5, 1)

    def test_unknown_fields_ignored(self):
        product = make_product()
        assert product.merged({"price": 10}) == product

    def test_original_is_untouched(self):
        product = make_product()
        product.merged({"name": "Something else"})
        assert product.name == "Credit Card"


# ── Serialization ────────────────────────────────────────────────────────────


class TestSerialization:

    def test_to_dict_uses_iso_dates(self):
        raw = make_product(release=date(2025, 3, 1)).to_dict()
        assert raw["date_release"] == "2025-03-01"
        assert raw["date_revision"] == "2026-03-01"

    def test_from_dict_accepts_datetime_strings(self):
        raw = make_product().to_dict()
        raw["date_release"] = "2025-01-01T00:00:00.000Z"
        assert Product.from_dict(raw).date_release == date(2025, 1, 1)

    def test_from_dict_missing_field_rejected(self):
        raw = make_product().to_dict()
        del raw["logo"]
        with pytest.raises(ValidationError) as exc_info:
            Product.from_dict(raw)
        assert "logo" in exc_info.value.errors

    def test_parse_date_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid date"):
            parse_date("not-a-date", "date_release")


# ── Draft ────────────────────────────────────────────────────────────────────


class TestDraft:

    def test_defaults_are_empty(self):
        draft = ProductDraft()
        assert draft.id == ""
        assert draft.date_release is None
        assert draft.date_revision is None

    def test_with_release_sets_both_dates(self):
        draft = ProductDraft().with_release(date(2025, 12, 1))
        assert draft.date_release == date(2025, 12, 1)
        assert draft.date_revision == date(2026, 12, 1)

    def test_round_trip_through_product(self):
        product = make_product()
        assert ProductDraft.from_product(product).to_product() == product

    def test_to_product_without_dates_rejected(self):
        with pytest.raises(ValidationError):
            ProductDraft(id="abc").to_product()
