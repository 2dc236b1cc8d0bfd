"""Recipe extractors for embedded structured data."""

from dormchef_recipes.app.services.url_parsing.extractors.schema_org import (
    extract_recipe_from_schema_org,
    locate_recipe_block,
    normalize_recipe_block,
)

__all__ = [
    "extract_recipe_from_schema_org",
    "locate_recipe_block",
    "normalize_recipe_block",
]
