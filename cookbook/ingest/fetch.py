"""Page fetcher used by the recipe import."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import requests

from cookbook.settings import settings


logger = logging.getLogger(__name__)


def fetch_url(url: str, timeout: Optional[float] = None) -> Tuple[str, str]:
    """Download a recipe page once, following redirects.

    Sends the configured USER_AGENT and uses FETCH_TIMEOUT unless `timeout`
    is given. Returns the decoded page text and the URL it was served from.
    Status codes of 400 and above raise requests.HTTPError.
    """
    if timeout is None:
        timeout = settings.fetch_timeout
    logger.debug("GET %s (timeout=%ss)", url, timeout)
    resp = requests.get(
        url,
        headers={"User-Agent": settings.USER_AGENT},
        timeout=timeout,
        allow_redirects=True,
    )
    resp.raise_for_status()
    if resp.url != url:
        logger.info("Fetched %s via redirect to %s (%d bytes)", url, resp.url, len(resp.text))
    else:
        logger.info("Fetched %s (%d bytes)", url, len(resp.text))
    return resp.text, resp.url
