"""Unit tests for the product validation rules."""

from datetime import date, datetime, timedelta

from catalog.domain.model.product import ProductDraft, revision_date_for
from catalog.domain.service.validation import (
    DATE_REQUIRED_MESSAGE,
    DATE_TOO_EARLY_MESSAGE,
    DESCRIPTION_LENGTH_MESSAGE,
    ID_LENGTH_MESSAGE,
    NAME_LENGTH_MESSAGE,
    REQUIRED_MESSAGE,
    validate_product,
)

TODAY = date(2026, 3, 10)


def _valid(**overrides) -> ProductDraft:
    fields = dict(
        id="abc123",
        name="Valid Name",
        description="Valid description here",
        logo="L",
        date_release=TODAY,
        date_revision=revision_date_for(TODAY),
    )
    fields.update(overrides)
    return ProductDraft(**fields)


class TestValidProduct:

    def test_no_errors(self):
        assert validate_product(_valid(), TODAY) == {}

    def test_boundaries_inclusive(self):
        draft = _valid(id="abc", name="x" * 5, description="d" * 10)
        assert validate_product(draft, TODAY) == {}
        draft = _valid(id="a" * 10, name="x" * 100, description="d" * 200)
        assert validate_product(draft, TODAY) == {}

    def test_future_release_accepted(self):
        assert validate_product(_valid(date_release=TODAY + timedelta(days=30)), TODAY) == {}


class TestFieldRules:

    def test_short_id_is_the_only_error(self):
        errors = validate_product(_valid(id="ab"), TODAY)
        assert errors == {"id": ID_LENGTH_MESSAGE}

    def test_long_id(self):
        assert validate_product(_valid(id="a" * 11), TODAY) == {"id": ID_LENGTH_MESSAGE}

    def test_name_length(self):
        assert validate_product(_valid(name="abcd"), TODAY) == {"name": NAME_LENGTH_MESSAGE}
        assert validate_product(_valid(name="x" * 101), TODAY) == {"name": NAME_LENGTH_MESSAGE}

    def test_description_length(self):
        errors = validate_product(_valid(description="too short"), TODAY)
        assert errors == {"description": DESCRIPTION_LENGTH_MESSAGE}

    def test_logo_required(self):
        assert validate_product(_valid(logo=""), TODAY) == {"logo": REQUIRED_MESSAGE}

    def test_revision_required_only(self):
        errors = validate_product(_valid(date_revision=None), TODAY)
        assert errors == {"date_revision": DATE_REQUIRED_MESSAGE}

    def test_revision_not_cross_checked(self):
        assert validate_product(_valid(date_revision=date(1999, 1, 1)), TODAY) == {}


class TestReleaseDate:

    def test_yesterday_rejected(self):
        errors = validate_product(_valid(date_release=TODAY - timedelta(days=1)), TODAY)
        assert errors["date_release"] == DATE_TOO_EARLY_MESSAGE

    def test_yesterday_rejected_alongside_other_errors(self):
        errors = validate_product(
            ProductDraft(date_release=TODAY - timedelta(days=1)), TODAY
        )
        assert errors["date_release"] == DATE_TOO_EARLY_MESSAGE
        assert set(errors) == {"id", "name", "description", "logo", "date_release", "date_revision"}

    def test_missing_release(self):
        errors = validate_product(_valid(date_release=None), TODAY)
        assert errors == {"date_release": DATE_REQUIRED_MESSAGE}

    def test_time_of_day_ignored(self):
        today_evening = datetime(2026, 3, 10, 23, 59)
        later_today = datetime(2026, 3, 10, 8, 0)
        assert validate_product(_valid(date_release=later_today), today_evening) == {}


class TestCollectsEverything:

    def test_empty_draft_reports_every_field(self):
        errors = validate_product(ProductDraft(), TODAY)
        assert set(errors) == {"id", "name", "description", "logo", "date_release", "date_revision"}
