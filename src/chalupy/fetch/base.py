"""Base fetcher interface for HTML documents."""

from __future__ import annotations

from abc import ABC, abstractmethod


class DocumentFetcher(ABC):
    """
    Abstract interface for retrieving raw HTML.
    Implementations: PageFetcher (httpx), test doubles with fixed fixtures.
    """

    @abstractmethod
    def fetch_document(self, url: str, retries: int = 2) -> str:
        """
        Return the HTML text at url.
        Raises NetworkError once retries are exhausted; never returns a partial document.
        """
        ...
