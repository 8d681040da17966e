"""Tests for caller parameter validation."""

import math

import pytest

from chalupy.errors import InvalidParameter
from chalupy.validation import (
    parse_search_criteria,
    validate_date,
    validate_number,
    validate_slug,
)


class TestSlug:
    @pytest.mark.parametrize("slug", ["krkonose", "orlicke-hory", "a", "x" * 50, "kraj-2"])
    def test_valid(self, slug: str) -> None:
        assert validate_slug("region", slug) == slug

    @pytest.mark.parametrize(
        "slug",
        ["", "Krkonose", "krkonoše", "krkonose/../x", "se saunou", "x" * 51, "a_b", "krkonose\n", None, 5],
    )
    def test_invalid(self, slug: object) -> None:
        with pytest.raises(InvalidParameter) as exc:
            validate_slug("region", slug)
        assert exc.value.field == "region"


class TestDate:
    def test_valid(self) -> None:
        assert validate_date("dateFrom", "2026-07-15").isoformat() == "2026-07-15"

    def test_leap_day(self) -> None:
        assert validate_date("dateFrom", "2028-02-29").day == 29

    @pytest.mark.parametrize("value", ["2026-02-30", "2026-13-01", "2026-01-32", "2027-02-29"])
    def test_not_a_calendar_date(self, value: str) -> None:
        with pytest.raises(InvalidParameter, match="not a valid calendar date"):
            validate_date("dateFrom", value)

    @pytest.mark.parametrize("value", ["15.7.2026", "2026/07/15", "2026-7-15", "20260715", "", "2026-07-15\n", 20260715])
    def test_wrong_format(self, value: object) -> None:
        with pytest.raises(InvalidParameter, match="YYYY-MM-DD"):
            validate_date("dateFrom", value)


class TestNumber:
    @pytest.mark.parametrize("value", [0, 1, 8, 2500.5])
    def test_valid(self, value: float) -> None:
        assert validate_number("persons", value) == value

    @pytest.mark.parametrize("value", [-1, math.nan, math.inf, -math.inf, "8", True, None])
    def test_invalid(self, value: object) -> None:
        with pytest.raises(InvalidParameter):
            validate_number("persons", value)

    @pytest.mark.parametrize("value", [10**400, -(10**400)])
    def test_huge_integer(self, value: int) -> None:
        with pytest.raises(InvalidParameter, match="finite number"):
            validate_number("maxResults", value, maximum=100)

    def test_maximum(self) -> None:
        assert validate_number("maxResults", 100, maximum=100) == 100
        with pytest.raises(InvalidParameter, match="must not exceed 100"):
            validate_number("maxResults", 101, maximum=100)


class TestSearchCriteria:
    def test_defaults(self) -> None:
        criteria = parse_search_criteria(None)
        assert criteria.max_results == 10
        assert criteria.region is None
        assert criteria.features == ()

    def test_full(self) -> None:
        criteria = parse_search_criteria(
            {
                "query": "  sauna ",
                "region": "vysocina",
                "features": ["bazen-venkovni", "se-saunou"],
                "persons": 8,
                "dateFrom": "2026-07-15",
                "dateTo": "2026-07-22",
                "priceMin": 2000,
                "priceMax": 8000,
                "maxResults": 5,
            }
        )
        assert criteria.query == "sauna"
        assert criteria.region == "vysocina"
        assert criteria.features == ("bazen-venkovni", "se-saunou")
        assert criteria.persons == 8
        assert criteria.date_from == "2026-07-15"
        assert criteria.date_to == "2026-07-22"
        assert criteria.price_min == 2000
        assert criteria.price_max == 8000
        assert criteria.max_results == 5

    def test_none_values_are_absent(self) -> None:
        criteria = parse_search_criteria({"region": None, "maxResults": None})
        assert criteria.region is None
        assert criteria.max_results == 10

    def test_max_results_ceiling(self) -> None:
        assert parse_search_criteria({"maxResults": 100}).max_results == 100
        with pytest.raises(InvalidParameter) as exc:
            parse_search_criteria({"maxResults": 101})
        assert exc.value.field == "maxResults"

    def test_features_must_be_list(self) -> None:
        with pytest.raises(InvalidParameter, match="list of slugs"):
            parse_search_criteria({"features": "se-saunou"})

    def test_bad_feature_slug(self) -> None:
        with pytest.raises(InvalidParameter) as exc:
            parse_search_criteria({"features": ["se-saunou", "S Vířivkou"]})
        assert exc.value.field == "features"

    def test_date_order(self) -> None:
        with pytest.raises(InvalidParameter) as exc:
            parse_search_criteria({"dateFrom": "2026-07-22", "dateTo": "2026-07-15"})
        assert exc.value.field == "dateTo"

    def test_price_order(self) -> None:
        with pytest.raises(InvalidParameter) as exc:
            parse_search_criteria({"priceMin": 5000, "priceMax": 2000})
        assert exc.value.field == "priceMin"

    def test_query_too_long(self) -> None:
        with pytest.raises(InvalidParameter):
            parse_search_criteria({"query": "a" * 201})

    def test_persons_must_be_whole(self) -> None:
        assert parse_search_criteria({"persons": 4.0}).persons == 4
        with pytest.raises(InvalidParameter) as exc:
            parse_search_criteria({"persons": 2.5})
        assert exc.value.field == "persons"

    def test_repeated_features_collapse(self) -> None:
        criteria = parse_search_criteria({"features": ["se-saunou", "s-krbem", "se-saunou"]})
        assert criteria.features == ("se-saunou", "s-krbem")

    def test_blank_query_is_absent(self) -> None:
        assert parse_search_criteria({"query": "   "}).query is None
