"""Pytest fixtures."""

from pathlib import Path
from typing import Callable, Optional

import pytest

from chalupy.config import get_fetch_settings, get_site_settings
from chalupy.fetch import DocumentFetcher
from chalupy.models import FetchSettings, SiteSettings
from chalupy.service import ChalupyService

FIXTURES = Path(__file__).parent / "fixtures"


def read_fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


class FakeFetcher(DocumentFetcher):
    """Serves fixture HTML by URL substring and records every call."""

    def __init__(self, pages: Optional[dict[str, str]] = None, error: Optional[Exception] = None) -> None:
        self.pages = pages or {}
        self.error = error
        self.calls: list[str] = []

    def fetch_document(self, url: str, retries: int = 2) -> str:
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        for fragment, html in self.pages.items():
            if fragment in url:
                return html
        return "<html><body></body></html>"


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def site() -> SiteSettings:
    return get_site_settings({})


@pytest.fixture
def fetch_settings() -> FetchSettings:
    return get_fetch_settings({})


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_fetcher() -> FakeFetcher:
    return FakeFetcher(
        pages={
            "/oblasti/": read_fixture("regions.html"),
            "/vybaveni/": read_fixture("features.html"),
            "/chalupa-pod-snezkou-1234/": read_fixture("listing_detail.html"),
            "https://www.e-chalupy.cz/": read_fixture("listing_search.html"),
        }
    )


@pytest.fixture
def service(fake_fetcher: FakeFetcher, clock: FakeClock) -> ChalupyService:
    return ChalupyService(config={}, fetcher=fake_fetcher, clock=clock)


@pytest.fixture
def make_service(clock: FakeClock) -> Callable[[DocumentFetcher], ChalupyService]:
    def _make(fetcher: DocumentFetcher) -> ChalupyService:
        return ChalupyService(config={}, fetcher=fetcher, clock=clock)

    return _make
