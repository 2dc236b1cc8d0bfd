import logging

from dormchef_recipes.app.services.url_parsing.extractors.schema_org import (
    extract_recipe_from_schema_org,
)
from dormchef_recipes.app.services.url_parsing.html_fetcher import (
    fetch_html,
    validate_url_format,
)
from dormchef_recipes.app.services.url_parsing.models import ExtractedRecipe

logger = logging.getLogger(__name__)


async def import_recipe_from_url(url: str) -> ExtractedRecipe:
    """Fetch a page and build its ExtractedRecipe.

    Every failure surfaces as a RecipeImportError subclass; nothing is retried.
    """
    source_url = validate_url_format(url)
    page = await fetch_html(source_url)
    recipe = extract_recipe_from_schema_org(page.text, source_url, page.final_url)
    logger.info(
        "Imported '%s' from %s (%d ingredients, %d steps)",
        recipe.title[:50],
        source_url,
        len(recipe.ingredients),
        len(recipe.instructions),
    )
    return recipe
