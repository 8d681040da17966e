"""Page schemas: the selectors and patterns each extractor reads markup with.

A site layout change should only require a new schema instance, not changes
to the extraction pipeline.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ListingPageSchema:
    row: str = ".inzerat, .property-item, .listing-item, article"
    title: str = "h2, h3, .title, .property-title"
    price: str = ".price, .cena, .property-price"
    location: str = ".location, .locality, .lokace"
    description: str = ".description, .popis, p"
    link: str = "a[href]"
    image: str = "img"
    rating: str = ".rating, .hodnoceni"


@dataclass(frozen=True)
class DetailPageSchema:
    title: str = "h1, .detail-title"
    price: str = ".price, .cena, .detail-price"
    location: str = ".location, .locality, .lokace"
    meta_description: str = 'meta[name="description"], meta[property="og:description"]'
    meta_title: str = 'meta[property="og:title"]'
    # "<text> Lokalita: <place> ★ 4.9 (...)"
    meta_location_pattern: re.Pattern = field(
        default=re.compile(r"(?:Lokalita|Lokace)\s*:\s*(.+?)\s*[★⭐]")
    )
    meta_text_pattern: re.Pattern = field(
        default=re.compile(r"^(.*?)\s*(?:[|–-]\s*)?(?:(?:Lokalita|Lokace)\s*:|$)", re.S)
    )
    meta_rating_pattern: re.Pattern = field(default=re.compile(r"[★⭐]\s*(\d+(?:[.,]\d+)?)"))
    description_primary: str = ".popis-objektu, .description"
    description_secondary: str = ".detail-description, .popis"
    rating: str = ".rating, .hodnoceni"
    image: str = "img.main-image, .gallery img"
    features: str = ".features li, .vlastnosti li"
    tags: str = ".tags li, .stitky li"
    equipment_group: str = ".equipment-group, .vybaveni-skupina"
    equipment_heading: str = "h3, h4, .equipment-title"
    equipment_item: str = "li"
    capacity_pattern: re.Pattern = field(default=re.compile(r"(\d+)\s*osob", re.I))
    bedrooms_pattern: re.Pattern = field(default=re.compile(r"(\d+)\s*ložnic", re.I))
    short_description_length: int = 200


@dataclass(frozen=True)
class CatalogPageSchema:
    anchor: str = "a[href]"
    count: str = ".count, .pocet"
    count_pattern: re.Pattern = field(default=re.compile(r"\(\s*(\d[\d\s ]*)\s*\)"))


DEFAULT_LISTING_SCHEMA = ListingPageSchema()
DEFAULT_DETAIL_SCHEMA = DetailPageSchema()
DEFAULT_CATALOG_SCHEMA = CatalogPageSchema()
