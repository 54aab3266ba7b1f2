"""
Classification of raw HTTP responses into the uniform success/failure envelope.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import requests

from vine_client.models import Record, RecordList, failure

logger = logging.getLogger(__name__)

Envelope = Record | RecordList


def parse_body(response: requests.Response) -> Any:
    """Return the decoded JSON body, or ``None`` when it is empty or malformed."""

    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


def classify(body: Any) -> Envelope:
    """Map a decoded body onto a record, a record list or a failure envelope."""

    if isinstance(body, list):
        return RecordList(body)
    if not isinstance(body, Mapping):
        logger.debug("Unstructured response body of type %s", type(body).__name__)
        return failure()
    if body.get("success") is False:
        payload = dict(body)
        reason = payload.get("error")
        if "message" not in payload and isinstance(reason, str) and reason:
            payload["message"] = reason
        payload["error"] = True
        return Record.from_api(payload)
    return Record.from_api(body)


def normalize_response(response: requests.Response) -> Envelope:
    return classify(parse_body(response))
