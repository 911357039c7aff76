import pytest

from notifier.config import Settings

WEBHOOK_URL = "https://hooks.slack.com/services/T000/B000/XXXX"


@pytest.fixture
def settings():
    return Settings(slack_webhook_url=WEBHOOK_URL)
