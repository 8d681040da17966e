"""Tests for the URL safety gate and URL building."""

import pytest

from chalupy.errors import InvalidUrl
from chalupy.models import SearchCriteria, SiteSettings
from chalupy.urls import absolutize, build_catalog_url, build_search_url, validate_target_url


class TestValidateTargetUrl:
    def test_accepts_site_url(self, site: SiteSettings) -> None:
        parsed = validate_target_url("https://www.e-chalupy.cz/chalupa-pod-snezkou-1234/", site)
        assert parsed.path == "/chalupa-pod-snezkou-1234/"

    def test_accepts_explicit_default_port(self, site: SiteSettings) -> None:
        validate_target_url("https://www.e-chalupy.cz:443/x/", site)

    @pytest.mark.parametrize(
        "url, reason",
        [
            ("https://evil.example.com/chalupa", "host"),
            ("https://e-chalupy.cz/chalupa", "host"),
            ("https://www.e-chalupy.cz.evil.com/chalupa", "host"),
            ("http://www.e-chalupy.cz/chalupa", "scheme"),
            ("ftp://www.e-chalupy.cz/chalupa", "scheme"),
            ("/chalupa-pod-snezkou-1234/", "absolute"),
            ("www.e-chalupy.cz/chalupa", "absolute"),
            ("https://www.e-chalupy.cz:8080/chalupa", "port"),
            ("https://user:pw@www.e-chalupy.cz/chalupa", "credentials"),
            ("", "non-empty"),
        ],
    )
    def test_rejects(self, site: SiteSettings, url: str, reason: str) -> None:
        with pytest.raises(InvalidUrl, match=reason):
            validate_target_url(url, site)

    def test_rejects_non_string(self, site: SiteSettings) -> None:
        with pytest.raises(InvalidUrl):
            validate_target_url(None, site)


class TestBuildSearchUrl:
    def test_no_filters(self, site: SiteSettings) -> None:
        assert build_search_url(SearchCriteria(), site) == "https://www.e-chalupy.cz/chalupy/"

    def test_region_and_features_are_path_segments(self, site: SiteSettings) -> None:
        criteria = SearchCriteria(region="vysocina", features=("bazen-venkovni", "se-saunou"))
        assert build_search_url(criteria, site) == "https://www.e-chalupy.cz/vysocina/bazen-venkovni/se-saunou/"

    def test_features_without_region(self, site: SiteSettings) -> None:
        criteria = SearchCriteria(features=("s-virivkou",))
        assert build_search_url(criteria, site) == "https://www.e-chalupy.cz/chalupy/s-virivkou/"

    def test_query_parameters(self, site: SiteSettings) -> None:
        criteria = SearchCriteria(
            region="sumava",
            persons=10,
            date_from="2026-07-15",
            date_to="2026-07-22",
            price_min=300,
            price_max=6000.0,
        )
        assert build_search_url(criteria, site) == (
            "https://www.e-chalupy.cz/sumava/"
            "?osob=10&termin_od=2026-07-15&termin_do=2026-07-22&cena_od=300&cena_do=6000"
        )

    def test_fractional_price(self, site: SiteSettings) -> None:
        url = build_search_url(SearchCriteria(price_max=2500.5), site)
        assert url.endswith("?cena_do=2500.5")

    def test_free_text_query_not_in_url(self, site: SiteSettings) -> None:
        url = build_search_url(SearchCriteria(query="sauna"), site)
        assert "sauna" not in url


def test_build_catalog_url(site: SiteSettings) -> None:
    assert build_catalog_url("/oblasti", site) == "https://www.e-chalupy.cz/oblasti/"
    assert build_catalog_url("vybaveni/", site) == "https://www.e-chalupy.cz/vybaveni/"


def test_absolutize(site: SiteSettings) -> None:
    assert absolutize("/chata-1/", site) == "https://www.e-chalupy.cz/chata-1/"
    assert absolutize("chata-1/", site) == "https://www.e-chalupy.cz/chata-1/"
    assert absolutize("https://img.e-chalupy.cz/a.jpg", site) == "https://img.e-chalupy.cz/a.jpg"
    assert absolutize(None, site) is None
    assert absolutize("  ", site) is None
    assert absolutize("javascript:void(0)", site) is None
