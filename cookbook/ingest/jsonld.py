"""Locate schema.org Recipe data in JSON-LD script blocks and normalize it."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from cookbook.ingest import fields
from cookbook.models.errors import ExtractionError
from cookbook.models.recipe_schema import RecipeRecord

logger = logging.getLogger(__name__)

JSON_LD_TYPE = "application/ld+json"
DEFAULT_NAME = "New Recipe"


def iter_jsonld_blocks(html: str) -> Iterator[Any]:
    """Yield each JSON-LD script body that decodes as JSON, in document order.

    Raises ParserRejectedMarkup if the HTML cannot be parsed at all.
    """
    soup = BeautifulSoup(html, "html.parser")
    for index, script in enumerate(soup.find_all("script")):
        if script.get("type") != JSON_LD_TYPE:
            continue
        body = script.string or script.get_text()
        try:
            block = json.loads(body)
        except (ValueError, RecursionError) as e:
            logger.debug("Skipping JSON-LD script #%d: invalid JSON (%s)", index, e)
            continue
        yield block


def _candidates(block: Any) -> Iterator[Dict[str, Any]]:
    """Objects of a decoded block in scan order (array order, then @graph)."""
    objects: List[Any] = block if isinstance(block, list) else [block]
    for obj in objects:
        if not isinstance(obj, dict):
            continue
        yield obj
        graph = obj.get("@graph")
        if isinstance(graph, list):
            for node in graph:
                if isinstance(node, dict):
                    yield node


def is_recipe(obj: Dict[str, Any]) -> bool:
    kind = obj.get("@type")
    if isinstance(kind, str):
        return kind == "Recipe"
    if isinstance(kind, list):
        return "Recipe" in kind
    return False


def find_recipe_object(html: str) -> Optional[Dict[str, Any]]:
    """Return the first JSON-LD object typed as Recipe, or None."""
    for block in iter_jsonld_blocks(html):
        for obj in _candidates(block):
            if is_recipe(obj):
                return obj
            logger.debug("Ignoring JSON-LD object of type %r", obj.get("@type"))
    return None


def to_record(obj: Dict[str, Any]) -> RecipeRecord:
    """Map a schema.org Recipe object onto a RecipeRecord."""
    return RecipeRecord(
        name=fields.string_field(obj, "name", DEFAULT_NAME),
        category=fields.string_field(obj, "recipeCategory"),
        keywords=fields.keywords_field(obj),
        description=fields.string_field(obj, "description"),
        date_created=fields.string_field(obj, "dateCreated"),
        date_modified=fields.string_field(obj, "dateModified"),
        image_url=fields.image_field(obj),
        source_url=fields.string_field(obj, "url"),
        prep_time=fields.string_field(obj, "prepTime"),
        cook_time=fields.string_field(obj, "cookTime"),
        total_time=fields.string_field(obj, "totalTime"),
        recipe_yield=fields.int_field(obj, "recipeYield"),
        ingredients=fields.string_list_field(obj, "recipeIngredient"),
        instructions=fields.text_list_field(obj, "recipeInstructions"),
        tools=fields.text_list_field(obj, "tool"),
        nutrition=fields.string_map_field(obj, "nutrition"),
    )


def extract(html: str) -> Tuple[Optional[RecipeRecord], Optional[ExtractionError]]:
    """Extract the first Recipe described by the page's JSON-LD.

    Returns (record, None) on success and (None, WEBSITE_NOT_SUPPORTED) when
    no script yields a Recipe object. Markup the parser rejects is reported
    the same way.
    """
    try:
        recipe_obj = find_recipe_object(html)
    except ParserRejectedMarkup as e:
        logger.warning("HTML parser rejected the page: %s", e)
        return None, ExtractionError.WEBSITE_NOT_SUPPORTED
    if recipe_obj is None:
        logger.info("No JSON-LD Recipe found on page")
        return None, ExtractionError.WEBSITE_NOT_SUPPORTED
    record = to_record(recipe_obj)
    logger.info("Extracted recipe: %s", record.name)
    return record, None
