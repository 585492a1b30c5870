"""Pytest configuration and fixtures for the match stats tests."""
import pytest

from application.services.retry_policy import RateLimitRetryPolicy


@pytest.fixture
def fast_retry() -> RateLimitRetryPolicy:
    """429 retry policy with millisecond backoff."""
    return RateLimitRetryPolicy(max_attempts=3, backoff_base_ms=5, backoff_factor=2.0)


@pytest.fixture
def no_retry() -> RateLimitRetryPolicy:
    return RateLimitRetryPolicy.disabled()
