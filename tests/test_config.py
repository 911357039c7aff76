"""
Unit tests for settings.
"""

import pytest
from pydantic import ValidationError

from notifier.config import Settings


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self, settings):
        assert settings.collection == "messages"
        assert settings.message_title == "New Firestore message"
        assert settings.max_block_chars == 2900
        assert settings.http_timeout is None

    def test_accepts_http_and_https(self):
        assert Settings(slack_webhook_url="http://example.com/hook").slack_webhook_url == (
            "http://example.com/hook"
        )
        assert Settings(slack_webhook_url="https://hooks.slack.com/services/T/B/X")

    @pytest.mark.parametrize(
        "url",
        ["", "not-a-url", "ftp://example.com/hook", "https:///path"],
    )
    def test_rejects_invalid_url(self, url):
        with pytest.raises(ValidationError) as exc_info:
            Settings(slack_webhook_url=url)
        assert "slack_webhook_url" in str(exc_info.value)

    def test_rejects_tiny_budget(self):
        with pytest.raises(ValidationError):
            Settings(slack_webhook_url="https://hooks.slack.com/x", max_block_chars=20)
