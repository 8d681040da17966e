"""httpx-backed document fetcher with politeness delays, retries and UA rotation."""

from __future__ import annotations

import logging
import random
import time
from typing import Callable, Optional

import httpx

from ..errors import NetworkError
from ..models import FetchSettings, SiteSettings
from ..urls import validate_target_url
from .base import DocumentFetcher
from .retry import Outcome, RetryState, classify_status, next_state

log = logging.getLogger(__name__)

USER_AGENTS = [
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 13_6) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.3 Safari/605.1.15",
    "Mozilla/5.0 (X11; Linux x86_64; rv:123.0) Gecko/20100101 Firefox/123.0",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36 Edg/121.0.0.0",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
]

BROWSER_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,*/*;q=0.8",
    "Accept-Language": "cs-CZ,cs;q=0.9,en;q=0.8",
    "Cache-Control": "no-cache",
    "Upgrade-Insecure-Requests": "1",
    "Sec-Fetch-Dest": "document",
    "Sec-Fetch-Mode": "navigate",
    "Sec-Fetch-Site": "none",
    "Sec-Fetch-User": "?1",
    "DNT": "1",
}

MAX_REDIRECTS = 5


class PageFetcher(DocumentFetcher):
    """
    Fetches HTML from the configured site.

    Every call sleeps a random politeness delay before its first request and a
    longer random backoff before each retry. Timeouts, transport errors and
    HTTP 5xx are retried; other non-2xx statuses fail at once. Redirects are
    followed by hand so each hop passes the same host/scheme gate as the
    original URL.
    """

    def __init__(
        self,
        site: SiteSettings,
        settings: FetchSettings,
        client: Optional[httpx.Client] = None,
        sleep: Callable[[float], None] = time.sleep,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.site = site
        self.settings = settings
        self._client = client or httpx.Client(
            timeout=httpx.Timeout(settings.timeout_seconds),
            follow_redirects=False,
        )
        self._sleep = sleep
        self._rng = rng or random.Random()
        self._clock = clock

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "PageFetcher":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _pause(self, bounds_ms: tuple[float, float]) -> None:
        low, high = bounds_ms
        self._sleep(self._rng.uniform(low, high) / 1000.0)

    def _headers(self) -> dict[str, str]:
        headers = dict(BROWSER_HEADERS)
        headers["User-Agent"] = self._rng.choice(USER_AGENTS)
        return headers

    def _check_deadline(self, deadline: float, request: httpx.Request) -> None:
        if self._clock() > deadline:
            raise httpx.ReadTimeout("attempt deadline exceeded", request=request)

    def _read_body(self, resp: httpx.Response, deadline: float) -> str:
        chunks = []
        for chunk in resp.iter_bytes():
            chunks.append(chunk)
            self._check_deadline(deadline, resp.request)
        return b"".join(chunks).decode(resp.encoding or "utf-8", errors="replace")

    def _get(self, url: str) -> tuple[int, str]:
        """GET with redirects, all hops within one timeout_seconds deadline.

        httpx.Timeout bounds each connect/read phase only; the deadline also
        stops a server that trickles bytes.
        """
        deadline = self._clock() + self.settings.timeout_seconds
        headers = self._headers()
        for _ in range(MAX_REDIRECTS + 1):
            with self._client.stream("GET", url, headers=headers) as resp:
                self._check_deadline(deadline, resp.request)
                if not resp.is_redirect:
                    return resp.status_code, self._read_body(resp, deadline)
                url = str(resp.url.join(resp.headers["location"]))
            validate_target_url(url, self.site)
            log.debug("Following redirect to %s", url)
        raise NetworkError(f"Too many redirects (>{MAX_REDIRECTS})")

    def _attempt(self, url: str) -> tuple[Outcome, str, Optional[int]]:
        """One request. Returns (outcome, body or error message, status code)."""
        try:
            status, body = self._get(url)
        except httpx.TimeoutException:
            return Outcome.RETRYABLE, f"Request timed out after {self.settings.timeout_seconds:g}s", None
        except httpx.TransportError as e:
            return Outcome.RETRYABLE, f"Network error: {e.__class__.__name__}", None

        outcome = classify_status(status)
        if outcome is Outcome.SUCCESS:
            return outcome, body, status
        return outcome, f"HTTP error! status: {status}", status

    def fetch_document(self, url: str, retries: int = 2) -> str:
        max_attempts = max(0, retries) + 1
        self._pause(self.settings.politeness_delay_ms)

        attempt = 0
        state = RetryState.ATTEMPTING
        while True:
            if state is RetryState.BACKOFF:
                self._pause(self.settings.backoff_delay_ms)
            attempt += 1
            outcome, payload, status = self._attempt(url)
            state = next_state(attempt, max_attempts, outcome)

            if state is RetryState.SUCCEEDED:
                log.debug("Fetched %s (attempt %d, %d bytes)", url, attempt, len(payload))
                return payload
            if state is RetryState.FAILED:
                if outcome is Outcome.RETRYABLE and max_attempts > 1:
                    payload = f"{payload} (after {attempt} attempts)"
                log.warning("Fetch failed for %s: %s", url, payload)
                raise NetworkError(payload, status_code=status)
            log.info("Attempt %d/%d for %s failed (%s), retrying", attempt, max_attempts, url, payload)
