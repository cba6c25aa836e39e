"""Unit tests for backoff arithmetic and Retry-After parsing."""
import pytest

from infrastructure.api import BackoffPolicy
from infrastructure.api.retry import retry_after_ms


class TestBackoffPolicy:
    def test_defaults(self):
        policy = BackoffPolicy()
        assert policy.max_attempts == 7
        assert policy.base_ms == 500
        assert policy.cap_ms == 16000

    def test_doubles_then_caps(self):
        policy = BackoffPolicy()
        seen = []
        backoff = float(policy.base_ms)
        for _ in range(8):
            seen.append(backoff)
            backoff = policy.next_backoff(backoff)
        assert seen == [500, 1000, 2000, 4000, 8000, 16000, 16000, 16000]

    def test_jitter_bounds(self):
        policy = BackoffPolicy()
        assert policy.jittered(1000, rand=lambda lo, hi: lo) == 500
        assert policy.jittered(1000, rand=lambda lo, hi: hi) == 1000
        for _ in range(50):
            assert 500 <= policy.jittered(1000) <= 1000


class TestRetryAfter:
    @pytest.mark.parametrize("value, expected", [
        ("2", 2000.0),
        ("0", 0.0),
        (" 1.5 ", 1500.0),
        ("soon", None),
        ("-3", None),
        ("nan", None),
        ("inf", None),
    ])
    def test_parse(self, value, expected):
        assert retry_after_ms({"retry-after": value}) == expected

    def test_missing_header(self):
        assert retry_after_ms({}) is None
