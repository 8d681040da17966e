"""Retry state machine for document fetching.

The fetch loop asks ``next_state`` what to do after every attempt, so the
policy can be tested without timers or sockets.
"""

from __future__ import annotations

from enum import Enum


class RetryState(Enum):
    ATTEMPTING = "attempting"
    BACKOFF = "backoff"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class Outcome(Enum):
    SUCCESS = "success"
    RETRYABLE = "retryable"  # timeout, transport error, HTTP 5xx
    FATAL = "fatal"  # any other non-2xx status


def next_state(attempt: int, max_attempts: int, outcome: Outcome) -> RetryState:
    """Transition after ``attempt`` (1-based) of ``max_attempts`` finished with ``outcome``."""
    if outcome is Outcome.SUCCESS:
        return RetryState.SUCCEEDED
    if outcome is Outcome.FATAL:
        return RetryState.FAILED
    if attempt < max_attempts:
        return RetryState.BACKOFF
    return RetryState.FAILED


def classify_status(status_code: int) -> Outcome:
    if 200 <= status_code < 300:
        return Outcome.SUCCESS
    if 500 <= status_code < 600:
        return Outcome.RETRYABLE
    return Outcome.FATAL
