"""Delivery of new-document notifications to the Slack webhook."""

import logging
from typing import Optional

import httpx

from notifier import ChannelPayload, DeliveryError
from notifier.config import Settings
from notifier.slack import format_slack

logger = logging.getLogger(__name__)


def http_client(
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    **kwargs,
) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=timeout, transport=transport, **kwargs)


def _read_body(response: httpx.Response) -> str:
    try:
        return response.text
    except Exception:
        return ""


class Notifier:
    """Render a Firestore document and post it to the configured webhook."""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings
        self.transport = transport

    async def notify(self, doc_id: str, record: dict) -> None:
        """
        Send a single notification for a new document.

        One attempt only: a transport error or a non-2xx response raises
        DeliveryError and is left to the platform.
        """
        payload = format_slack(doc_id, record, self.settings)
        await self._send(payload, doc_id)

    async def _send(self, payload: ChannelPayload, doc_id: str) -> None:
        try:
            async with http_client(
                timeout=self.settings.http_timeout, transport=self.transport
            ) as client:
                response = await client.request(
                    method=payload.method,
                    url=payload.url,
                    headers=payload.headers,
                    content=payload.body,
                )
        except httpx.HTTPError as e:
            logger.error(f"Failed to send notification for doc {doc_id}: {e}", exc_info=True)
            raise DeliveryError(None, str(e)) from e

        if not response.is_success:
            body = _read_body(response)
            logger.warning(
                f"Slack webhook returned status {response.status_code} for doc {doc_id}: {body[:200]}"
            )
            raise DeliveryError(response.status_code, body)

        logger.debug(f"Successfully sent notification for doc {doc_id}")
