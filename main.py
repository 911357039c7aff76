"""
Cloud Function entry points for Firestore-to-Slack notifications.
"""

from firebase_functions import firestore_fn
from firebase_functions.params import SecretParam

from notifier.handlers import on_message_created

# Slack Incoming Webhook URL stored as a Firebase secret
SLACK_WEBHOOK_URL = SecretParam("SLACK_WEBHOOK_URL")

REGION = "europe-central2"
COLLECTION = "messages"


@firestore_fn.on_document_created(
    document=f"{COLLECTION}/{{docId}}",
    region=REGION,
    secrets=[SLACK_WEBHOOK_URL],
)
def notify_slack_on_new_message(
    event: firestore_fn.Event[firestore_fn.DocumentSnapshot | None],
) -> None:
    """Send a Slack message when a new document is added to the messages collection."""
    return on_message_created(event)
