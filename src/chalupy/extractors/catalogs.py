"""Catalog pages -> Region / Feature records, vetted against the known slugs."""

from __future__ import annotations

import logging
import re
from typing import Callable, Mapping, Optional, TypeVar, Union
from urllib.parse import urlparse

from bs4 import Tag

from ..catalog import KNOWN_FEATURES, KNOWN_REGIONS
from ..models import Feature, Region, SiteSettings
from .common import first_text, make_soup, text_of
from .schema import DEFAULT_CATALOG_SCHEMA, CatalogPageSchema

log = logging.getLogger(__name__)

E = TypeVar("E", bound=Union[Region, Feature])


def _slug_from_href(href: str, site: SiteSettings) -> Optional[str]:
    try:
        parsed = urlparse(href.strip())
    except ValueError:
        return None
    if parsed.netloc and parsed.hostname != site.host:
        return None
    segments = [s for s in parsed.path.split("/") if s]
    return segments[-1].lower() if segments else None


def _count_and_name(anchor: Tag, schema: CatalogPageSchema) -> tuple[int, str]:
    text = text_of(anchor)
    count_text = first_text(anchor, schema.count)
    if count_text:
        digits = re.sub(r"\D", "", count_text)
        name = text.replace(count_text, "")
    else:
        m = schema.count_pattern.search(text)
        digits = re.sub(r"\D", "", m.group(1)) if m else ""
        name = schema.count_pattern.sub("", text)
    return (int(digits) if digits else 0), " ".join(name.split())


def _extract_catalog(
    html: str,
    known: Mapping[str, str],
    factory: Callable[[str, str, int], E],
    site: SiteSettings,
    schema: CatalogPageSchema,
) -> list[E]:
    """
    Keep anchors whose target is a known slug and whose count is positive.
    De-duplicated by slug, first occurrence wins.
    """
    soup = make_soup(html)
    entries: list[E] = []
    seen: set[str] = set()
    for anchor in soup.select(schema.anchor):
        slug = _slug_from_href(anchor.get("href", ""), site)
        if not slug or slug in seen or slug not in known:
            continue
        count, name = _count_and_name(anchor, schema)
        if count <= 0:
            continue
        seen.add(slug)
        entries.append(factory(slug, name or known[slug], count))
    return entries


def extract_regions(
    html: str,
    site: SiteSettings,
    schema: CatalogPageSchema = DEFAULT_CATALOG_SCHEMA,
    known: Mapping[str, str] = KNOWN_REGIONS,
) -> list[Region]:
    regions = _extract_catalog(html, known, Region, site, schema)
    log.debug("Extracted %d regions", len(regions))
    return regions


def extract_features(
    html: str,
    site: SiteSettings,
    schema: CatalogPageSchema = DEFAULT_CATALOG_SCHEMA,
    known: Mapping[str, str] = KNOWN_FEATURES,
) -> list[Feature]:
    features = _extract_catalog(html, known, Feature, site, schema)
    log.debug("Extracted %d features", len(features))
    return features
