"""Route test configuration: rate limiting off so tests can hit endpoints freely."""

from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def _disable_rate_limiter():
    with patch("core.ratelimit.limiter.enabled", False):
        yield
