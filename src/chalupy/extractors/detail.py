"""Property page -> ListingDetail."""

from __future__ import annotations

import logging
from typing import Optional

from bs4 import BeautifulSoup

from ..models import LOCATION_PLACEHOLDER, PRICE_PLACEHOLDER, ListingDetail, SiteSettings
from ..urls import absolutize
from .common import first_attr, first_text, image_src, make_soup, text_of
from .schema import DEFAULT_DETAIL_SCHEMA, DetailPageSchema

log = logging.getLogger(__name__)


def _meta_description(soup: BeautifulSoup, schema: DetailPageSchema) -> str:
    content = first_attr(soup, schema.meta_description, "content") or ""
    return " ".join(content.split())


def _location(soup: BeautifulSoup, meta: str, schema: DetailPageSchema) -> str:
    # the meta description is more stable than the visible layout
    m = schema.meta_location_pattern.search(meta)
    if m and m.group(1).strip():
        return m.group(1).strip()
    return first_text(soup, schema.location) or LOCATION_PLACEHOLDER


def _full_description(soup: BeautifulSoup, meta: str, schema: DetailPageSchema) -> str:
    """metadata-description pattern -> primary selector -> secondary selector."""
    m = schema.meta_text_pattern.search(meta) if meta else None
    if m and m.group(1).strip():
        return m.group(1).strip()
    for selector in (schema.description_primary, schema.description_secondary):
        text = first_text(soup, selector)
        if text:
            return text
    return ""


def _rating(soup: BeautifulSoup, meta: str, schema: DetailPageSchema) -> Optional[str]:
    rating = first_text(soup, schema.rating)
    if rating:
        return rating
    m = schema.meta_rating_pattern.search(meta)
    return m.group(1) if m else None


def _shorten(text: str, limit: int) -> str:
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def _scan_tags(
    soup: BeautifulSoup, schema: DetailPageSchema
) -> tuple[list[str], Optional[int], Optional[int]]:
    """Collect raw tags and derive capacity/bedrooms; first match per category wins."""
    tags: list[str] = []
    capacity: Optional[int] = None
    bedrooms: Optional[int] = None
    for el in soup.select(schema.tags):
        tag = text_of(el)
        if not tag:
            continue
        tags.append(tag)
        if capacity is None:
            m = schema.capacity_pattern.search(tag)
            if m:
                capacity = int(m.group(1))
        if bedrooms is None:
            m = schema.bedrooms_pattern.search(tag)
            if m:
                bedrooms = int(m.group(1))
    return tags, capacity, bedrooms


def _equipment(soup: BeautifulSoup, schema: DetailPageSchema) -> dict[str, tuple[str, ...]]:
    groups: dict[str, tuple[str, ...]] = {}
    for group in soup.select(schema.equipment_group):
        heading = first_text(group, schema.equipment_heading)
        items = tuple(t for t in (text_of(li) for li in group.select(schema.equipment_item)) if t)
        if not heading or not items:
            continue
        groups.setdefault(heading, items)
    return groups


def extract_listing_detail(
    html: str,
    url: str,
    site: SiteSettings,
    schema: DetailPageSchema = DEFAULT_DETAIL_SCHEMA,
) -> ListingDetail:
    soup = make_soup(html)
    meta = _meta_description(soup, schema)

    title = first_text(soup, schema.title) or (first_attr(soup, schema.meta_title, "content") or "")
    full_description = _full_description(soup, meta, schema)
    tags, capacity, bedrooms = _scan_tags(soup, schema)
    features = [t for t in (text_of(li) for li in soup.select(schema.features)) if t]
    equipment = _equipment(soup, schema)

    log.debug(
        "Parsed detail %s: %d tags, %d equipment groups, capacity=%s, bedrooms=%s",
        url, len(tags), len(equipment), capacity, bedrooms,
    )
    return ListingDetail(
        title=title,
        price=first_text(soup, schema.price) or PRICE_PLACEHOLDER,
        location=_location(soup, meta, schema),
        description=_shorten(full_description, schema.short_description_length),
        url=url,
        image_url=absolutize(image_src(soup, schema.image), site),
        rating=_rating(soup, meta, schema),
        full_description=full_description,
        features=tuple(features),
        capacity=capacity,
        bedrooms=bedrooms,
        tags=tuple(tags),
        equipment=equipment,
    )
