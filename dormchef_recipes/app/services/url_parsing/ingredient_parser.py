"""Ingredient line parsing: quantity, unit and item."""

import logging
import re
from decimal import Decimal
from typing import List, Optional

from dormchef_recipes.app.services.url_parsing.constants import UNIT_MAP
from dormchef_recipes.app.services.url_parsing.models import ParsedIngredient

logger = logging.getLogger(__name__)

# A whole number must not be the numerator of a bare fraction such as "1/2".
QUANTITY_RE = re.compile(r"^(?:(\d+)(?!\d*/))?\s*(?:(\d+)/(\d+))?")
UNIT_ITEM_RE = re.compile(r"^[\d\s/]+\s*([A-Za-z]+)\s+(.+)$")


def parse_quantity(text: str) -> Optional[Decimal]:
    """Read a leading whole number, fraction or mixed number ("1 1/2")."""
    match = QUANTITY_RE.match(text or "")
    if not match:
        return None
    whole, numerator, denominator = match.groups()
    quantity = Decimal(whole or 0)
    if numerator is not None:
        if int(denominator) == 0:
            return None
        quantity += Decimal(numerator) / Decimal(denominator)
    return quantity if quantity > 0 else None


def normalize_unit(unit: str) -> str:
    """Map a unit word to its canonical abbreviation, keeping unknown words as-is."""
    return UNIT_MAP.get(unit.lower(), unit)


def parse_ingredient(raw: str) -> ParsedIngredient:
    """Split one free-text ingredient line; never raises."""
    trimmed = (raw or "").strip()
    quantity = parse_quantity(trimmed)

    match = UNIT_ITEM_RE.match(trimmed)
    if not match:
        # Quantity is only reported alongside a unit and item.
        return ParsedIngredient(raw=trimmed)

    return ParsedIngredient(
        raw=trimmed,
        quantity=quantity,
        unit=normalize_unit(match.group(1)),
        item=match.group(2).strip(),
    )


def parse_ingredients(values) -> List[ParsedIngredient]:
    """Parse a recipeIngredient list in source order."""
    if not isinstance(values, list):
        if values is not None:
            logger.warning("recipeIngredient is not a list: %s", type(values).__name__)
        return []

    parsed: List[ParsedIngredient] = []
    for idx, value in enumerate(values):
        if not isinstance(value, str):
            logger.debug("Ingredient %d: unexpected type %s", idx, type(value).__name__)
            continue
        ingredient = parse_ingredient(value)
        logger.debug(
            "Ingredient %d: '%s' -> qty=%s, unit=%s, item=%s",
            idx,
            ingredient.raw[:50],
            ingredient.quantity,
            ingredient.unit,
            ingredient.item,
        )
        parsed.append(ingredient)
    logger.info("Parsed %d ingredients", len(parsed))
    return parsed
