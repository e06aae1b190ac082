from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from sbg_api.client.errors import ResponseParseError, ResponseStatusError

logger = logging.getLogger(__name__)

SUCCESS_STATUS_CODES = frozenset({200, 201, 204})
SUCCESS_MARKER = "Operation finished successfully."


def check_and_retrieve_response(response: httpx.Response) -> Any:
    """Return the parsed JSON body of a successful response.

    Only 200, 201 and 204 count as success. A successful response without a body
    yields ``{"Operation finished successfully.": <status>}``; anything else raises
    :class:`ResponseStatusError` carrying the status code and reason phrase.
    """

    status = response.status_code
    if status not in SUCCESS_STATUS_CODES:
        logger.warning("SBG request failed with status %s %s", status, response.reason_phrase)
        raise ResponseStatusError(status, response.reason_phrase)

    if not response.content:
        return {SUCCESS_MARKER: status}

    try:
        return json.loads(response.text)
    except json.JSONDecodeError as exc:
        raise ResponseParseError(f"invalid JSON in response body (status {status}): {exc}") from exc


__all__ = ["SUCCESS_MARKER", "SUCCESS_STATUS_CODES", "check_and_retrieve_response"]
