"""Import a recipe from a web page URL."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Tuple
from urllib.parse import urlparse

import requests

from cookbook.ingest.fetch import fetch_url
from cookbook.ingest.jsonld import extract
from cookbook.models.errors import ExtractionError
from cookbook.models.recipe_schema import RecipeRecord

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], Tuple[str, str]]


def is_valid_url(url: str) -> bool:
    try:
        parts = urlparse(url.strip())
    except ValueError:
        return False
    return parts.scheme in ("http", "https") and bool(parts.netloc)


def scrape(
    url: str, fetch: Fetcher = fetch_url
) -> Tuple[Optional[RecipeRecord], Optional[ExtractionError]]:
    """Fetch `url` once and extract its JSON-LD recipe.

    `fetch` returns (html, final_url) and raises a requests exception on
    failure; it is injectable so callers and tests can supply their own.
    """
    if not is_valid_url(url):
        logger.info("Rejected import url: %r", url)
        return None, ExtractionError.BAD_URL
    url = url.strip()
    try:
        html, final_url = fetch(url)
    except requests.RequestException as e:
        logger.warning("Could not load %s: %s", url, e)
        return None, ExtractionError.CHECK_CONNECTION
    except Exception:
        logger.exception("Fetcher failed for %s", url)
        return None, ExtractionError.CHECK_CONNECTION

    record, error = extract(html)
    if record is None:
        logger.info("No recipe extracted from %s (%s)", final_url, error.name)
        return None, error
    if not record.source_url:
        record.source_url = url
    return record, None
