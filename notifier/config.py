from functools import lru_cache
from typing import Optional
from urllib.parse import urlparse

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Injected by Firebase from the SLACK_WEBHOOK_URL secret
    slack_webhook_url: str

    collection: str = "messages"
    message_title: str = "New Firestore message"

    # Slack rejects section text over 3000 chars
    max_block_chars: int = 2900

    # None leaves the request without a timeout
    http_timeout: Optional[float] = None

    model_config = {"env_file": ".env", "extra": "ignore"}

    @field_validator("slack_webhook_url")
    @classmethod
    def _check_webhook_url(cls, v: str) -> str:
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https"):
            raise ValueError("slack_webhook_url must use http or https protocol")
        if not parsed.hostname:
            raise ValueError("slack_webhook_url has no host")
        return v

    @field_validator("max_block_chars")
    @classmethod
    def _check_max_block_chars(cls, v: int) -> int:
        if v <= 20:
            raise ValueError("max_block_chars must be greater than 20")
        return v


@lru_cache
def get_settings() -> Settings:
    """Build settings on first use; secrets are only present at invocation time."""
    return Settings()
