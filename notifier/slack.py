"""Slack Block Kit formatting for new Firestore documents."""

import json

from notifier import ChannelPayload
from notifier.config import Settings
from notifier.serialize import json_for_slack, message_text

TRUNCATION_MARKER = "\n… (truncated)"

# Room left under the budget for the truncation marker
_TRUNCATION_SLACK = 20

FENCE = "```"


def code_block_with_limit(text: str, max_chars: int = 2900) -> str:
    """Wrap text in a code fence, truncating it when longer than *max_chars*."""
    if len(text) <= max_chars:
        return f"{FENCE}{text}{FENCE}"
    return f"{FENCE}{text[:max_chars - _TRUNCATION_SLACK]}{TRUNCATION_MARKER}{FENCE}"


def build_message(doc_id: str, record: dict, settings: Settings) -> dict:
    """Build the Slack message body (``text`` plus ``blocks``) for a document."""
    return {
        "text": f"{settings.message_title}: {doc_id}",
        "blocks": [
            {
                "type": "header",
                "text": {"type": "plain_text", "text": settings.message_title},
            },
            {
                "type": "section",
                "text": {"type": "plain_text", "text": message_text(record)},
            },
            {
                "type": "section",
                "fields": [
                    {"type": "mrkdwn", "text": f"*Collection:*\n{settings.collection}"},
                    {"type": "mrkdwn", "text": f"*Doc ID:*\n{doc_id}"},
                ],
            },
            {
                "type": "section",
                "text": {
                    "type": "mrkdwn",
                    "text": code_block_with_limit(
                        json_for_slack(record), settings.max_block_chars
                    ),
                },
            },
        ],
    }


def format_slack(doc_id: str, record: dict, settings: Settings) -> ChannelPayload:
    """Format a new document as a Slack webhook request."""
    return ChannelPayload(
        method="POST",
        url=settings.slack_webhook_url,
        headers={"Content-Type": "application/json"},
        body=json.dumps(build_message(doc_id, record, settings)),
    )
