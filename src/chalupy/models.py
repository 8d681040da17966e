"""Data models for listings, catalogs and settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import urlparse

PRICE_PLACEHOLDER = "Cena není uvedena"
LOCATION_PLACEHOLDER = "Lokalita není uvedena"

DEFAULT_MAX_RESULTS = 10
MAX_RESULTS_CEILING = 100


@dataclass(frozen=True)
class SearchCriteria:
    """Validated search parameters (see validation.parse_search_criteria)."""

    query: Optional[str] = None
    region: Optional[str] = None
    features: tuple[str, ...] = ()
    persons: Optional[int] = None
    date_from: Optional[str] = None
    date_to: Optional[str] = None
    price_min: Optional[float] = None
    price_max: Optional[float] = None
    max_results: int = DEFAULT_MAX_RESULTS


@dataclass(frozen=True)
class ListingSummary:
    """One row of the search results page."""

    title: str
    price: str
    location: str
    description: str
    url: str
    image_url: Optional[str] = None
    rating: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "title": self.title,
            "price": self.price,
            "location": self.location,
            "description": self.description,
            "url": self.url,
        }
        if self.image_url:
            out["imageUrl"] = self.image_url
        if self.rating:
            out["rating"] = self.rating
        return out


@dataclass(frozen=True)
class ListingDetail(ListingSummary):
    """Full property page. capacity/bedrooms stay None when no tag states them."""

    full_description: str = ""
    features: tuple[str, ...] = ()
    capacity: Optional[int] = None
    bedrooms: Optional[int] = None
    tags: tuple[str, ...] = ()
    equipment: dict[str, tuple[str, ...]] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        out = super().to_dict()
        out["fullDescription"] = self.full_description
        out["features"] = list(self.features)
        if self.capacity is not None:
            out["capacity"] = self.capacity
        if self.bedrooms is not None:
            out["bedrooms"] = self.bedrooms
        out["tags"] = list(self.tags)
        out["equipment"] = {k: list(v) for k, v in self.equipment.items()}
        return out


@dataclass(frozen=True)
class Region:
    slug: str
    name: str
    count: int

    def to_dict(self) -> dict[str, Any]:
        return {"slug": self.slug, "name": self.name, "count": self.count}


@dataclass(frozen=True)
class Feature:
    slug: str
    name: str
    count: int

    def to_dict(self) -> dict[str, Any]:
        return {"slug": self.slug, "name": self.name, "count": self.count}


@dataclass
class SiteSettings:
    """Target site layout (from config)."""

    base_url: str
    search_path: str
    regions_path: str
    features_path: str

    @property
    def host(self) -> str:
        return urlparse(self.base_url).hostname or ""

    @property
    def scheme(self) -> str:
        return urlparse(self.base_url).scheme


@dataclass
class FetchSettings:
    """Outbound request discipline."""

    timeout_seconds: float
    retries: int
    politeness_delay_ms: tuple[float, float]
    backoff_delay_ms: tuple[float, float]


@dataclass
class CacheSettings:
    ttl_seconds: float
