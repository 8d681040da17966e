"""HTML extractors: markup in, typed records out. No I/O."""

from .catalogs import extract_features, extract_regions
from .detail import extract_listing_detail
from .listings import extract_listings
from .schema import (
    DEFAULT_CATALOG_SCHEMA,
    DEFAULT_DETAIL_SCHEMA,
    DEFAULT_LISTING_SCHEMA,
    CatalogPageSchema,
    DetailPageSchema,
    ListingPageSchema,
)

__all__ = [
    "extract_listings",
    "extract_listing_detail",
    "extract_regions",
    "extract_features",
    "ListingPageSchema",
    "DetailPageSchema",
    "CatalogPageSchema",
    "DEFAULT_LISTING_SCHEMA",
    "DEFAULT_DETAIL_SCHEMA",
    "DEFAULT_CATALOG_SCHEMA",
]
