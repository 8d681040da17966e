"""Tests for model serialization."""

from chalupy.models import Feature, ListingDetail, ListingSummary, Region


def test_summary_omits_missing_optionals() -> None:
    listing = ListingSummary(
        title="Chata",
        price="1 000 Kč",
        location="Šumava",
        description="",
        url="https://www.e-chalupy.cz/chata-1/",
    )
    assert listing.to_dict() == {
        "title": "Chata",
        "price": "1 000 Kč",
        "location": "Šumava",
        "description": "",
        "url": "https://www.e-chalupy.cz/chata-1/",
    }


def test_summary_includes_image_and_rating() -> None:
    listing = ListingSummary(
        title="Chata",
        price="1 000 Kč",
        location="Šumava",
        description="",
        url="https://www.e-chalupy.cz/chata-1/",
        image_url="https://www.e-chalupy.cz/foto/1.jpg",
        rating="4.5",
    )
    data = listing.to_dict()
    assert data["imageUrl"] == "https://www.e-chalupy.cz/foto/1.jpg"
    assert data["rating"] == "4.5"


def test_detail_uses_camel_case_and_lists() -> None:
    detail = ListingDetail(
        title="Chata",
        price="1 000 Kč",
        location="Šumava",
        description="Popis",
        url="https://www.e-chalupy.cz/chata-1/",
        full_description="Popis",
        features=("Krb",),
        capacity=6,
        tags=("6 osob",),
        equipment={"Kuchyně": ("Myčka",)},
    )
    data = detail.to_dict()
    assert data["fullDescription"] == "Popis"
    assert data["features"] == ["Krb"]
    assert data["capacity"] == 6
    assert "bedrooms" not in data
    assert data["equipment"] == {"Kuchyně": ["Myčka"]}


def test_catalog_entries() -> None:
    assert Region("sumava", "Šumava", 3).to_dict() == {"slug": "sumava", "name": "Šumava", "count": 3}
    assert Feature("s-krbem", "S krbem", 1).to_dict()["name"] == "S krbem"
