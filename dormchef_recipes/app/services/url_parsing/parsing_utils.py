"""Field normalizers for schema.org recipe data.

Every helper here is total: malformed or unexpected input degrades to ``None``
(or an empty list) instead of raising.
"""

import re
from typing import List, Optional

from dormchef_recipes.app.services.url_parsing.constants import YIELD_SEPARATOR
from dormchef_recipes.app.services.url_parsing.models import Nutrition

ISO_DURATION_RE = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?")
HOURS_RE = re.compile(r"(\d+)\s*(?:hour|hr|h)", re.I)
MINUTES_RE = re.compile(r"(\d+)\s*(?:minute|min|m)", re.I)


def as_text(value) -> Optional[str]:
    """Return a stripped string, or None for blanks and non-strings."""
    if isinstance(value, str):
        return value.strip() or None
    return None


def parse_iso8601_duration(duration: str) -> Optional[int]:
    """Parse a compact ISO-8601 duration (e.g. PT1H15M) into minutes."""
    if not duration:
        return None
    match = ISO_DURATION_RE.search(duration)
    if not match:
        return None
    hours = int(match.group(1) or 0)
    minutes = int(match.group(2) or 0)
    return hours * 60 + minutes or None


def parse_duration(value) -> Optional[int]:
    """Parse an ISO duration or a phrase like "1 hour 15 minutes" into minutes."""
    if not isinstance(value, str) or not value:
        return None
    iso_minutes = parse_iso8601_duration(value)
    if iso_minutes is not None:
        return iso_minutes

    hour_match = HOURS_RE.search(value)
    minute_match = MINUTES_RE.search(value)
    hours = int(hour_match.group(1)) if hour_match else 0
    minutes = int(minute_match.group(1)) if minute_match else 0
    return hours * 60 + minutes or None


def resolve_author(value) -> Optional[str]:
    """Reduce a schema.org author (name, Person object or list) to a plain name."""
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, dict):
        return as_text(value.get("name"))
    if isinstance(value, list):
        for entry in value:
            name = resolve_author(entry)
            if name:
                return name
    return None


def _instruction_entry_text(entry) -> Optional[str]:
    if isinstance(entry, str):
        return entry.strip() or None
    if isinstance(entry, dict):
        return as_text(entry.get("text")) or as_text(entry.get("name"))
    return None


def resolve_instructions(value) -> List[str]:
    """Flatten recipeInstructions into an ordered list of non-empty steps."""
    if isinstance(value, list):
        steps = (_instruction_entry_text(entry) for entry in value)
        return [step for step in steps if step]
    if isinstance(value, str):
        segments = (segment.strip() for segment in re.split(r"\n+", value))
        return [segment for segment in segments if segment]
    return []


def _yield_text(value) -> Optional[str]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    return as_text(value)


def resolve_yield(value) -> Optional[str]:
    """Join list yields with " or "; pass scalar yields through as text."""
    if isinstance(value, list):
        parts = (_yield_text(part) for part in value)
        return YIELD_SEPARATOR.join(part for part in parts if part) or None
    return _yield_text(value)


def resolve_image(value) -> Optional[str]:
    """Take the first image when several are given; ImageObjects use their url."""
    if isinstance(value, list):
        return resolve_image(value[0]) if value else None
    if isinstance(value, dict):
        return as_text(value.get("url"))
    return as_text(value)


def resolve_nutrition(value) -> Optional[Nutrition]:
    if not isinstance(value, dict):
        return None
    calories = value.get("calories")
    if isinstance(calories, (int, float)) and not isinstance(calories, bool):
        calories = str(calories)
    calories = as_text(calories)
    if calories is None:
        return None
    return Nutrition(calories=calories)
