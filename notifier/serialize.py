"""
Readable JSON rendering of Firestore documents.

Firestore hands timestamps back as ``DatetimeWithNanoseconds`` (a ``datetime``
subclass), which ``json`` cannot encode. Every point in time is rendered as an
ISO-8601 UTC string with millisecond precision, e.g. ``2024-01-01T00:00:00.000Z``.
"""

import base64
import datetime
import json
import math
from typing import Any

from google.cloud import firestore


def format_timestamp(value: datetime.datetime) -> str:
    """Render a datetime as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC. Naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=datetime.timezone.utc)
    else:
        value = value.astimezone(datetime.timezone.utc)
    return f"{value.strftime('%Y-%m-%dT%H:%M:%S')}.{value.microsecond // 1000:03d}Z"


def _default(value: Any) -> Any:
    if isinstance(value, datetime.datetime):
        return format_timestamp(value)
    if isinstance(value, datetime.date):
        return value.isoformat()
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, firestore.GeoPoint):
        return {"latitude": value.latitude, "longitude": value.longitude}
    if isinstance(value, firestore.DocumentReference):
        return value.path
    return str(value)


def _finite(value: Any) -> Any:
    # json writes NaN/Infinity as bare tokens; render them as null instead
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _finite(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(v) for v in value]
    return value


def json_for_slack(value: Any) -> str:
    """Pretty-print any document value with 2-space indentation."""
    return json.dumps(_finite(value), indent=2, ensure_ascii=False, default=_default)


def message_text(record: dict) -> str:
    """
    Extract the summary line for a document.

    A string ``message`` field is used verbatim; anything else (including a
    missing field) is rendered as JSON.
    """
    message = record.get("message")
    if isinstance(message, str):
        return message
    return json_for_slack(message if message is not None else "")
