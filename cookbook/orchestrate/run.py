"""Orchestrator helpers: import a recipe URL and adapt it to a serving size.

Used by the CLI and scripts; the actual work lives in cookbook.ingest and
cookbook.units.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from cookbook.ingest.fetch import fetch_url
from cookbook.ingest.scrape import Fetcher, scrape
from cookbook.models.errors import ExtractionError
from cookbook.models.recipe_schema import RecipeRecord
from cookbook.units.quantity import rescale_lines, serving_factor

logger = logging.getLogger(__name__)


@dataclass
class ImportResult:
    record: Optional[RecipeRecord] = None
    error: Optional[ExtractionError] = None
    # ingredient lines that had no leading quantity to scale
    unscaled: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.record is not None


def scale_recipe(record: RecipeRecord, servings: float) -> ImportResult:
    """Return a copy of `record` with ingredients rescaled to `servings`."""
    factor = serving_factor(record.recipe_yield, servings)
    scaled = record.model_copy(deep=True)
    lines = rescale_lines(record.ingredients, factor)
    scaled.ingredients = [text for text, _ in lines]
    if float(servings).is_integer():
        scaled.recipe_yield = int(servings)
    unscaled = [text for text, ok in lines if not ok]
    logger.debug(
        "Scaled %s by %.3f (%d unscaled lines)", record.name, factor, len(unscaled)
    )
    return ImportResult(record=scaled, unscaled=unscaled)


def url_to_recipe(
    url: str, servings: Optional[float] = None, fetch: Fetcher = fetch_url
) -> ImportResult:
    """Fetch a URL, extract its recipe and optionally rescale it."""
    logger.info("Import start | url=%s", url)
    record, error = scrape(url, fetch=fetch)
    if record is None:
        logger.info("Import failed | url=%s error=%s", url, error.name)
        return ImportResult(error=error)
    if servings is not None and servings > 0:
        result = scale_recipe(record, servings)
    else:
        result = ImportResult(record=record)
    logger.info(
        "Import success | url=%s title=%s ingredients=%d",
        url,
        result.record.name,
        len(result.record.ingredients),
    )
    return result
