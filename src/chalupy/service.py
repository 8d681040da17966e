"""Orchestration façade: the four public operations."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Mapping, Optional

from .cache import CatalogCache
from .config import get_cache_settings, get_fetch_settings, get_site_settings, load_config
from .extractors import (
    DEFAULT_CATALOG_SCHEMA,
    DEFAULT_DETAIL_SCHEMA,
    DEFAULT_LISTING_SCHEMA,
    CatalogPageSchema,
    DetailPageSchema,
    ListingPageSchema,
    extract_features,
    extract_listing_detail,
    extract_listings,
    extract_regions,
)
from .fetch import DocumentFetcher, PageFetcher
from .models import Feature, ListingDetail, ListingSummary, Region
from .urls import build_catalog_url, build_search_url, validate_target_url
from .validation import parse_search_criteria

log = logging.getLogger(__name__)


class ChalupyService:
    """
    Straight-line pipelines: validate -> cache check -> build URL -> fetch ->
    extract -> filter -> return. Any failure short-circuits with a
    ChalupyError; no partial results.

    Owns the regions/features caches; pass a fetcher and clock to test without
    network or real time.
    """

    def __init__(
        self,
        config: dict | None = None,
        fetcher: DocumentFetcher | None = None,
        clock: Callable[[], float] = time.monotonic,
        listing_schema: ListingPageSchema = DEFAULT_LISTING_SCHEMA,
        detail_schema: DetailPageSchema = DEFAULT_DETAIL_SCHEMA,
        catalog_schema: CatalogPageSchema = DEFAULT_CATALOG_SCHEMA,
    ) -> None:
        cfg = config if config is not None else load_config()
        self.site = get_site_settings(cfg)
        self.fetch_settings = get_fetch_settings(cfg)
        cache_settings = get_cache_settings(cfg)
        self.fetcher = fetcher or PageFetcher(self.site, self.fetch_settings)
        self.region_cache: CatalogCache[Region] = CatalogCache("regions", cache_settings.ttl_seconds, clock)
        self.feature_cache: CatalogCache[Feature] = CatalogCache("features", cache_settings.ttl_seconds, clock)
        self.listing_schema = listing_schema
        self.detail_schema = detail_schema
        self.catalog_schema = catalog_schema

    def _fetch(self, url: str) -> str:
        return self.fetcher.fetch_document(url, retries=self.fetch_settings.retries)

    def search_listings(self, params: Optional[Mapping[str, Any]] = None) -> list[ListingSummary]:
        """Search listings; params use the tool's camelCase names."""
        criteria = parse_search_criteria(params)
        url = build_search_url(criteria, self.site)
        log.info("Searching listings: %s", url)
        html = self._fetch(url)
        listings = extract_listings(html, criteria, self.site, self.listing_schema)
        log.info("Search returned %d listings", len(listings))
        return listings

    def get_listing_details(self, url: Any) -> ListingDetail:
        parsed = validate_target_url(url, self.site)
        target = parsed.geturl()
        log.info("Fetching listing detail: %s", target)
        html = self._fetch(target)
        return extract_listing_detail(html, target, self.site, self.detail_schema)

    def list_regions(self) -> list[Region]:
        def load() -> list[Region]:
            html = self._fetch(build_catalog_url(self.site.regions_path, self.site))
            return extract_regions(html, self.site, self.catalog_schema)

        return list(self.region_cache.get_or_load(load))

    def list_features(self) -> list[Feature]:
        def load() -> list[Feature]:
            html = self._fetch(build_catalog_url(self.site.features_path, self.site))
            return extract_features(html, self.site, self.catalog_schema)

        return list(self.feature_cache.get_or_load(load))

    def clear_caches(self) -> None:
        self.region_cache.clear()
        self.feature_cache.clear()

    def close(self) -> None:
        close = getattr(self.fetcher, "close", None)
        if callable(close):
            close()
