"""Firestore event handling for the messages collection."""

import asyncio
import logging
from typing import Optional

from notifier.config import Settings, get_settings
from notifier.dispatcher import Notifier

logger = logging.getLogger(__name__)


def on_message_created(event, settings: Optional[Settings] = None) -> None:
    """
    Handle a document-created event.

    Args:
        event: Firestore event; ``event.data`` is the DocumentSnapshot (or None)
            and ``event.params["docId"]`` the new document's id
        settings: Optional settings override, resolved from the environment otherwise
    """
    doc_id = event.params["docId"]
    snapshot = event.data
    data = snapshot.to_dict() if snapshot is not None else None
    if data is None:
        logger.debug("Document %s carries no payload, skipping notification", doc_id)
        return

    notifier = Notifier(settings if settings is not None else get_settings())
    asyncio.run(notifier.notify(doc_id, data))
    logger.info("Slack notification sent for %s", doc_id)
