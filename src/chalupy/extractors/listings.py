"""Search results page -> ListingSummary records."""

from __future__ import annotations

import logging
from typing import Optional

from bs4 import Tag

from ..filters import filter_by_query
from ..models import (
    LOCATION_PLACEHOLDER,
    PRICE_PLACEHOLDER,
    ListingSummary,
    SearchCriteria,
    SiteSettings,
)
from ..urls import absolutize
from .common import first_attr, first_text, image_src, make_soup
from .schema import DEFAULT_LISTING_SCHEMA, ListingPageSchema

log = logging.getLogger(__name__)


def _row_to_listing(row: Tag, site: SiteSettings, schema: ListingPageSchema) -> Optional[ListingSummary]:
    """Build a summary from one row; None when title or link is missing."""
    title = first_text(row, schema.title)
    url = absolutize(first_attr(row, schema.link, "href"), site)
    if not title or not url:
        return None
    return ListingSummary(
        title=title,
        price=first_text(row, schema.price) or PRICE_PLACEHOLDER,
        location=first_text(row, schema.location) or LOCATION_PLACEHOLDER,
        description=first_text(row, schema.description),
        url=url,
        image_url=absolutize(image_src(row, schema.image), site),
        rating=first_text(row, schema.rating) or None,
    )


def extract_listings(
    html: str,
    criteria: SearchCriteria,
    site: SiteSettings,
    schema: ListingPageSchema = DEFAULT_LISTING_SCHEMA,
) -> list[ListingSummary]:
    """
    Parse candidate rows in document order, stopping at criteria.max_results.

    Rows without a title or detail link are skipped without affecting their
    neighbours. A row nested inside an earlier candidate row is the same
    listing and is skipped. criteria.query is then applied client-side.
    """
    soup = make_soup(html)
    listings: list[ListingSummary] = []
    seen_rows: set[int] = set()
    skipped = 0

    for row in soup.select(schema.row):
        if len(listings) >= criteria.max_results:
            break
        if any(id(parent) in seen_rows for parent in row.parents):
            continue
        seen_rows.add(id(row))
        listing = _row_to_listing(row, site, schema)
        if listing is None:
            skipped += 1
            continue
        listings.append(listing)

    log.debug("Extracted %d listings (%d rows skipped)", len(listings), skipped)
    if criteria.query:
        listings = filter_by_query(listings, criteria.query)
    return listings
