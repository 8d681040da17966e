"""Outbound HTML fetching."""

from .base import DocumentFetcher
from .client import USER_AGENTS, PageFetcher
from .retry import Outcome, RetryState, classify_status, next_state

__all__ = [
    "DocumentFetcher",
    "PageFetcher",
    "USER_AGENTS",
    "Outcome",
    "RetryState",
    "classify_status",
    "next_state",
]
