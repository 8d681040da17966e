"""Caller parameter validation.

Everything here runs before any network action, so malformed input never
triggers a remote request.
"""

from __future__ import annotations

import math
import re
from datetime import date
from typing import Any, Mapping, Optional

from .errors import InvalidParameter
from .models import DEFAULT_MAX_RESULTS, MAX_RESULTS_CEILING, SearchCriteria

_SLUG_RE = re.compile(r"^[a-z0-9-]+$")
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

SLUG_MAX_LENGTH = 50
QUERY_MAX_LENGTH = 200


def validate_slug(field: str, value: Any) -> str:
    """Region/feature slug: 1-50 chars of [a-z0-9-]."""
    if not isinstance(value, str) or not value:
        raise InvalidParameter(field, "must be a non-empty string")
    if len(value) > SLUG_MAX_LENGTH:
        raise InvalidParameter(field, f"must be at most {SLUG_MAX_LENGTH} characters")
    if not _SLUG_RE.fullmatch(value):
        raise InvalidParameter(field, "may contain only lowercase letters, digits and hyphens")
    return value


def validate_date(field: str, value: Any) -> date:
    """YYYY-MM-DD that is also a real calendar date."""
    if not isinstance(value, str) or not _DATE_RE.fullmatch(value):
        raise InvalidParameter(field, "must be a date in YYYY-MM-DD format")
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise InvalidParameter(field, f"'{value}' is not a valid calendar date") from None


def validate_number(field: str, value: Any, maximum: Optional[float] = None) -> float:
    """Finite, non-negative number, optionally capped."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameter(field, "must be a number")
    try:
        number = float(value)
    except OverflowError:
        raise InvalidParameter(field, "must be a finite number") from None
    if not math.isfinite(number):
        raise InvalidParameter(field, "must be a finite number")
    if number < 0:
        raise InvalidParameter(field, "must not be negative")
    if maximum is not None and number > maximum:
        raise InvalidParameter(field, f"must not exceed {maximum:g}")
    return number


def validate_query(value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidParameter("query", "must be a string")
    if len(value) > QUERY_MAX_LENGTH:
        raise InvalidParameter("query", f"must be at most {QUERY_MAX_LENGTH} characters")
    return value


def parse_search_criteria(params: Mapping[str, Any] | None) -> SearchCriteria:
    """Validate a raw (camelCase) search parameter bag into SearchCriteria.

    None values count as absent. Raises InvalidParameter on the first bad field.
    """
    params = {k: v for k, v in (params or {}).items() if v is not None}

    query = validate_query(params["query"]).strip() if "query" in params else None
    region = validate_slug("region", params["region"]) if "region" in params else None

    features: tuple[str, ...] = ()
    if "features" in params:
        raw = params["features"]
        if not isinstance(raw, (list, tuple)):
            raise InvalidParameter("features", "must be a list of slugs")
        # de-duplicated, first occurrence keeps its place
        features = tuple(dict.fromkeys(validate_slug("features", f) for f in raw))

    persons: Optional[int] = None
    if "persons" in params:
        count = validate_number("persons", params["persons"])
        if not count.is_integer():
            raise InvalidParameter("persons", "must be a whole number")
        persons = int(count)
    price_min = validate_number("priceMin", params["priceMin"]) if "priceMin" in params else None
    price_max = validate_number("priceMax", params["priceMax"]) if "priceMax" in params else None
    if price_min is not None and price_max is not None and price_min > price_max:
        raise InvalidParameter("priceMin", "must not be greater than priceMax")

    date_from = validate_date("dateFrom", params["dateFrom"]) if "dateFrom" in params else None
    date_to = validate_date("dateTo", params["dateTo"]) if "dateTo" in params else None
    if date_from and date_to and date_to < date_from:
        raise InvalidParameter("dateTo", "must not be before dateFrom")

    max_results = DEFAULT_MAX_RESULTS
    if "maxResults" in params:
        max_results = int(validate_number("maxResults", params["maxResults"], maximum=MAX_RESULTS_CEILING))

    return SearchCriteria(
        query=query or None,
        region=region,
        features=features,
        persons=persons,
        date_from=date_from.isoformat() if date_from else None,
        date_to=date_to.isoformat() if date_to else None,
        price_min=price_min,
        price_max=price_max,
        max_results=max_results,
    )
