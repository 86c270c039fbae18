"""
IndexNow URL submission so search engines pick up new and updated articles.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional
from urllib.parse import urlsplit

import requests

from ..util import format_request_exception

logger = logging.getLogger(__name__)

INDEXNOW_ENDPOINT = "https://api.indexnow.org/IndexNow"


class IndexNowError(RuntimeError):
    """Raised when the IndexNow endpoint cannot be reached or rejects the submission."""


@dataclass
class IndexNowResult:
    """
    Outcome of a submission.

    Attributes:
        submitted: URLs sent to the endpoint.
        rejected: URLs dropped because they are invalid or on another host.
        status_code: HTTP status returned by the endpoint (None when nothing was sent).
    """
    submitted: List[str] = field(default_factory=list)
    rejected: List[str] = field(default_factory=list)
    status_code: Optional[int] = None

    @property
    def sent(self) -> bool:
        return self.status_code is not None


def default_key_location(host: str, key: str) -> str:
    return f"https://{host}/{key}.txt"


def filter_urls_for_host(urls: Iterable[str], host: str) -> tuple[List[str], List[str]]:
    """Split URLs into (valid, rejected) depending on whether they live on host."""
    valid: List[str] = []
    rejected: List[str] = []
    for url in urls:
        parts = urlsplit(url)
        if parts.scheme not in {"http", "https"} or not parts.netloc:
            logger.error("Invalid URL: %s", url)
            rejected.append(url)
        elif parts.netloc != host:
            logger.warning("Skipping %s (host is not %s)", url, host)
            rejected.append(url)
        else:
            valid.append(url)
    return valid, rejected


def submit_urls(
    urls: Iterable[str],
    *,
    host: str,
    key: str,
    key_location: Optional[str] = None,
    endpoint: str = INDEXNOW_ENDPOINT,
    timeout: float = 20,
) -> IndexNowResult:
    """
    Submit URLs on `host` to IndexNow.

    Nothing is sent when no URL survives host filtering.

    Raises:
        IndexNowError: On network failure or a non-2xx response.
    """
    valid, rejected = filter_urls_for_host(urls, host)
    result = IndexNowResult(submitted=valid, rejected=rejected)
    if not valid:
        logger.error("No valid URLs to submit")
        return result

    payload = {
        "host": host,
        "key": key,
        "keyLocation": key_location or default_key_location(host, key),
        "urlList": valid,
    }
    try:
        response = requests.post(
            endpoint,
            json=payload,
            headers={"Content-Type": "application/json; charset=utf-8"},
            timeout=timeout,
        )
        response.raise_for_status()
    except requests.RequestException as exc:
        raise IndexNowError(f"IndexNow submission failed: {format_request_exception(exc)}") from exc

    result.status_code = response.status_code
    logger.info("Submitted %d URL(s) to IndexNow (status %s)", len(valid), response.status_code)
    return result
