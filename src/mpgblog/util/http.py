"""
Helpers for reporting HTTP failures without leaking secrets.
"""

from __future__ import annotations

import re

import requests

_KEY_PATTERN = re.compile(r"(key=)[^&\s]+", re.IGNORECASE)


def format_request_exception(exc: requests.RequestException) -> str:
    """
    Summarise a requests exception as "<status> <reason> (<url>)".

    Query-string keys are masked.
    """
    response = getattr(exc, "response", None)
    if response is not None:
        url = _KEY_PATTERN.sub(r"\1***", str(getattr(response, "url", "") or ""))
        status = getattr(response, "status_code", "?")
        reason = getattr(response, "reason", "") or ""
        return f"{status} {reason} ({url})".replace("  ", " ").strip()
    return _KEY_PATTERN.sub(r"\1***", str(exc))
