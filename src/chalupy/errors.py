"""Error taxonomy shared by validation, fetching and the tool server."""

from __future__ import annotations

from typing import Optional


class ChalupyError(Exception):
    """Base class for failures that are safe to report to the caller."""


class InvalidParameter(ChalupyError):
    """Caller input has the wrong shape, range or format."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid parameter '{field}': {reason}")


class InvalidUrl(ChalupyError):
    """Target URL fails the host/scheme safety gate."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid URL '{url}': {reason}")


class NetworkError(ChalupyError):
    """Transport failure, timeout, or unsuccessful HTTP status."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)
