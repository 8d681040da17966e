"""Client-side text filter for already-parsed listings."""

from __future__ import annotations

from typing import Optional, Sequence

from .models import ListingSummary


def filter_by_query(
    listings: Sequence[ListingSummary],
    query: Optional[str],
) -> list[ListingSummary]:
    """
    Keep listings whose title, description or location contains query.
    - Case-insensitive substring match
    - Empty/blank query keeps everything
    """
    needle = (query or "").strip().lower()
    if not needle:
        return list(listings)
    text_fields = ["title", "description", "location"]
    result = []
    for l in listings:
        if any(needle in str(getattr(l, f, "")).lower() for f in text_fields):
            result.append(l)
    return result
