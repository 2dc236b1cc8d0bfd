"""URL recipe import package.

Fetches a recipe page, locates its schema.org JSON-LD Recipe block and
normalizes it into an ExtractedRecipe, parsing every ingredient line into
quantity, unit and item.
"""

from dormchef_recipes.app.services.url_parsing.errors import (
    ExtractionFailed,
    FetchFailed,
    FetchTimeout,
    InvalidUrlFormat,
    NetworkError,
    RecipeImportError,
)
from dormchef_recipes.app.services.url_parsing.html_fetcher import (
    fetch_html,
    validate_url_format,
)
from dormchef_recipes.app.services.url_parsing.ingredient_parser import (
    normalize_unit,
    parse_ingredient,
    parse_ingredients,
    parse_quantity,
)
from dormchef_recipes.app.services.url_parsing.models import (
    ExtractedRecipe,
    FetchedPage,
    Nutrition,
    ParsedIngredient,
)
from dormchef_recipes.app.services.url_parsing.parsing_utils import (
    parse_duration,
    parse_iso8601_duration,
    resolve_author,
    resolve_image,
    resolve_instructions,
    resolve_nutrition,
    resolve_yield,
)

__all__ = [
    # Models
    "ExtractedRecipe",
    "FetchedPage",
    "Nutrition",
    "ParsedIngredient",
    # Errors
    "ExtractionFailed",
    "FetchFailed",
    "FetchTimeout",
    "InvalidUrlFormat",
    "NetworkError",
    "RecipeImportError",
    # HTML fetching
    "fetch_html",
    "validate_url_format",
    # Ingredient parsing
    "normalize_unit",
    "parse_ingredient",
    "parse_ingredients",
    "parse_quantity",
    # Field normalizers
    "parse_duration",
    "parse_iso8601_duration",
    "resolve_author",
    "resolve_image",
    "resolve_instructions",
    "resolve_nutrition",
    "resolve_yield",
]
