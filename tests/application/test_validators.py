"""Tests for shared field validation helpers."""

import datetime as dt

import pytest

from chaseplus_backend.application.validators import (
    optional_price,
    require_date,
    require_non_empty_list,
    require_price,
    require_text,
)
from chaseplus_backend.core.exceptions import ValidationError


class TestRequireText:
    def test_strips_value(self):
        assert require_text("  Title ", "title") == "Title"

    @pytest.mark.parametrize("value", [None, "", "   ", 5])
    def test_rejects_missing(self, value):
        with pytest.raises(ValidationError, match="title is required") as exc_info:
            require_text(value, "title")
        assert exc_info.value.field == "title"


class TestRequireNonEmptyList:
    def test_drops_blank_entries_and_keeps_order(self):
        assert require_non_empty_list([" b ", "", "a"], "highlights") == ["b", "a"]

    @pytest.mark.parametrize("value", [None, [], ["", "  "], "not a list"])
    def test_rejects_empty(self, value):
        with pytest.raises(ValidationError):
            require_non_empty_list(value, "highlights")

    def test_rejects_non_string_entries(self):
        with pytest.raises(ValidationError, match="must be strings"):
            require_non_empty_list(["ok", 3], "highlights")


class TestPrices:
    @pytest.mark.parametrize("value, expected", [(0, 0.0), ("499.50", 499.5), (10, 10.0)])
    def test_require_price(self, value, expected):
        assert require_price(value) == expected

    @pytest.mark.parametrize("value", [None, "", -1, "abc", True, "nan", "inf", "-inf", float("nan")])
    def test_require_price_rejects(self, value):
        with pytest.raises(ValidationError):
            require_price(value)

    def test_optional_price_allows_absent(self):
        assert optional_price(None) is None
        assert optional_price("") is None
        assert optional_price("12") == 12.0


class TestRequireDate:
    def test_accepts_iso_string(self):
        assert require_date("2024-03-01") == dt.date(2024, 3, 1)

    def test_accepts_iso_datetime_string(self):
        assert require_date("2024-03-01T10:00:00Z") == dt.date(2024, 3, 1)

    def test_accepts_datetime(self):
        assert require_date(dt.datetime(2024, 3, 1, 8, 30)) == dt.date(2024, 3, 1)

    @pytest.mark.parametrize("value", [None, "", "03/01/2024", "2024-03-01garbage"])
    def test_rejects_invalid(self, value):
        with pytest.raises(ValidationError):
            require_date(value)
