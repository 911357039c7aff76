"""Base types for the Slack notifier."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ChannelPayload:
    """Represents the HTTP request payload for the Slack webhook."""
    method: str
    url: str
    headers: dict[str, str]
    body: str  # JSON string


class DeliveryError(Exception):
    """Raised when the webhook request fails or returns a non-success status."""

    def __init__(self, status_code: Optional[int], body: str = ""):
        self.status_code = status_code
        self.body = body
        if status_code is None:
            message = f"Slack webhook failed: {body}"
        else:
            message = f"Slack webhook failed: {status_code} {body}"
        super().__init__(message)
