"""
Tests for shared HTTP helpers.
"""

from basketball_stat.core.http import DEFAULT_RETRY_AFTER, parse_retry_after


class TestParseRetryAfter:
    def test_delay_seconds(self):
        assert parse_retry_after("12") == 12
        assert parse_retry_after(" 0 ") == 0

    def test_http_date(self):
        # Dates already in the past mean "retry now"
        assert parse_retry_after("Wed, 21 Oct 2015 07:28:00 GMT") == 0
        assert parse_retry_after("Fri, 01 Jan 2100 00:00:00 GMT") > 0

    def test_unparseable(self):
        assert parse_retry_after(None) == DEFAULT_RETRY_AFTER
        assert parse_retry_after("soon") == DEFAULT_RETRY_AFTER
        assert parse_retry_after("soon", default=5) == 5
