"""Target URL safety gate and search/catalog URL building."""

from __future__ import annotations

from typing import Optional
from urllib.parse import ParseResult, quote, urlencode, urljoin, urlparse

from .errors import InvalidUrl
from .models import SearchCriteria, SiteSettings


def validate_target_url(candidate: object, site: SiteSettings) -> ParseResult:
    """Allow only absolute https URLs on the configured site host.

    Guards every caller-supplied URL so the server cannot be used as a relay
    to arbitrary hosts.
    """
    if not isinstance(candidate, str) or not candidate.strip():
        raise InvalidUrl(str(candidate), "URL must be a non-empty string")
    try:
        parsed = urlparse(candidate.strip())
        host = parsed.hostname
        port = parsed.port
    except ValueError:
        raise InvalidUrl(candidate, "URL could not be parsed") from None
    if not parsed.scheme or not host:
        raise InvalidUrl(candidate, "URL must be absolute")
    if parsed.scheme != site.scheme:
        raise InvalidUrl(candidate, f"scheme must be {site.scheme}")
    if host != site.host:
        raise InvalidUrl(candidate, f"host must be {site.host}")
    if port is not None and port != 443:
        raise InvalidUrl(candidate, "non-default ports are not allowed")
    if parsed.username or parsed.password:
        raise InvalidUrl(candidate, "credentials are not allowed in the URL")
    return parsed


def _fmt_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:g}"


def build_search_url(criteria: SearchCriteria, site: SiteSettings) -> str:
    """Region and features become path segments, the rest query parameters.

    /krkonose/se-saunou/?osob=8&termin_od=2026-07-15&cena_do=5000
    """
    segments = [criteria.region] if criteria.region else [site.search_path.strip("/")]
    segments.extend(criteria.features)
    path = "/" + "/".join(quote(s, safe="") for s in segments if s) + "/"

    query: list[tuple[str, str]] = []
    if criteria.persons is not None:
        query.append(("osob", _fmt_number(criteria.persons)))
    if criteria.date_from:
        query.append(("termin_od", criteria.date_from))
    if criteria.date_to:
        query.append(("termin_do", criteria.date_to))
    if criteria.price_min is not None:
        query.append(("cena_od", _fmt_number(criteria.price_min)))
    if criteria.price_max is not None:
        query.append(("cena_do", _fmt_number(criteria.price_max)))

    url = f"{site.base_url}{path}"
    if query:
        url += "?" + urlencode(query, quote_via=quote)
    return url


def build_catalog_url(path: str, site: SiteSettings) -> str:
    return f"{site.base_url}/{path.strip('/')}/"


def absolutize(href: Optional[str], site: SiteSettings) -> Optional[str]:
    """Resolve a (possibly relative) link against the site root."""
    if not href:
        return None
    href = href.strip()
    if not href or href.startswith(("javascript:", "data:", "mailto:", "#")):
        return None
    return urljoin(site.base_url + "/", href)
