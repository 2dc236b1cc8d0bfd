"""Schema.org JSON-LD recipe extraction."""

import json
import logging
from typing import Iterator, List, Optional

from bs4 import BeautifulSoup

from dormchef_recipes.app.services.url_parsing.constants import (
    GRAPH_KEY,
    JSON_LD_SCRIPT_TYPE,
    RECIPE_TYPE,
    TYPE_KEY,
)
from dormchef_recipes.app.services.url_parsing.errors import ExtractionFailed
from dormchef_recipes.app.services.url_parsing.ingredient_parser import parse_ingredients
from dormchef_recipes.app.services.url_parsing.models import ExtractedRecipe
from dormchef_recipes.app.services.url_parsing.parsing_utils import (
    as_text,
    parse_duration,
    resolve_author,
    resolve_image,
    resolve_instructions,
    resolve_nutrition,
    resolve_yield,
)

logger = logging.getLogger(__name__)


def _iter_json_ld_blocks(html: str) -> Iterator[object]:
    """Yield every JSON-LD payload that parses, in document order."""
    soup = BeautifulSoup(html or "", "lxml")
    scripts = soup.find_all("script", attrs={"type": JSON_LD_SCRIPT_TYPE})
    logger.info("Found %d JSON-LD script blocks", len(scripts))

    for idx, script in enumerate(scripts):
        raw_json = script.string or script.get_text()
        if not raw_json or not raw_json.strip():
            logger.debug("JSON-LD block %d is empty", idx)
            continue
        try:
            data = json.loads(raw_json)
        except (ValueError, RecursionError) as exc:
            logger.warning(
                "JSON-LD block %d failed to parse: %s (first 200 chars: %s)",
                idx,
                exc,
                raw_json[:200],
            )
            continue
        yield data


def _candidates(data: object) -> List[object]:
    """Flatten one JSON-LD payload into the objects that may describe a recipe."""
    candidates: List[object] = []
    if isinstance(data, dict):
        graph = data.get(GRAPH_KEY)
        if isinstance(graph, list):
            candidates.extend(graph)
        candidates.append(data)
    elif isinstance(data, list):
        candidates.extend(data)
    return candidates


def _is_recipe(candidate: object) -> bool:
    return isinstance(candidate, dict) and candidate.get(TYPE_KEY) == RECIPE_TYPE


def locate_recipe_block(html: str) -> Optional[dict]:
    """Return the first JSON-LD object typed "Recipe", or None.

    Blocks that fail to parse are skipped. Fields are never merged across
    blocks.
    """
    for block_idx, data in enumerate(_iter_json_ld_blocks(html)):
        for candidate in _candidates(data):
            if _is_recipe(candidate):
                logger.info("Using Recipe object from JSON-LD block %d", block_idx)
                return candidate
            if isinstance(candidate, dict):
                logger.debug(
                    "Skipping JSON-LD object with @type %s", candidate.get(TYPE_KEY)
                )
    return None


def normalize_recipe_block(
    block: dict, source_url: str, final_url: Optional[str] = None
) -> ExtractedRecipe:
    """Convert a located Recipe object into an ExtractedRecipe.

    Raises ExtractionFailed when the block has no title, no ingredients or no
    instructions.
    """
    title = as_text(block.get("name"))
    ingredients = parse_ingredients(block.get("recipeIngredient"))
    instructions = resolve_instructions(block.get("recipeInstructions"))

    missing = [
        field
        for field, value in (
            ("title", title),
            ("ingredients", ingredients),
            ("instructions", instructions),
        )
        if not value
    ]
    if missing:
        logger.warning("Recipe block for %s is missing %s", source_url, ", ".join(missing))
        raise ExtractionFailed(f"Recipe data is missing: {', '.join(missing)}")

    return ExtractedRecipe(
        source_url=source_url,
        canonical_url=final_url if final_url and final_url != source_url else None,
        title=title,
        description=as_text(block.get("description")),
        image_url=resolve_image(block.get("image")),
        yield_=resolve_yield(block.get("recipeYield")),
        total_time_minutes=parse_duration(block.get("totalTime")),
        ingredients=ingredients,
        instructions=instructions,
        author=resolve_author(block.get("author")),
        nutrition=resolve_nutrition(block.get("nutrition")),
    )


def extract_recipe_from_schema_org(
    html: str, source_url: str, final_url: Optional[str] = None
) -> ExtractedRecipe:
    """Locate and normalize the page's Recipe block, or raise ExtractionFailed."""
    block = locate_recipe_block(html)
    if block is None:
        logger.warning("No JSON-LD Recipe found for %s", source_url)
        raise ExtractionFailed("No schema.org Recipe data found on the page")
    return normalize_recipe_block(block, source_url, final_url)
