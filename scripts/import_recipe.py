#!/usr/bin/env python
"""
Preview a recipe import from the command line.

Prints the extracted recipe as JSON on success, or the error code and message
on failure (exit status 1).
"""
import argparse
import asyncio
import json
import logging
import sys

from dormchef_recipes.app.services.recipe_importer import import_recipe_from_url
from dormchef_recipes.app.services.url_parsing.errors import RecipeImportError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("import_recipe")


async def main() -> int:
    parser = argparse.ArgumentParser(description="Import a recipe from a URL (preview only)")
    parser.add_argument("url")
    args = parser.parse_args()

    try:
        recipe = await import_recipe_from_url(args.url)
    except RecipeImportError as exc:
        logger.error("Import failed for %s", args.url)
        print(json.dumps({"error_code": exc.error_code, "message": exc.message, "details": str(exc)}))
        return 1

    print(json.dumps({"recipe": recipe.model_dump(mode="json", by_alias=True)}, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
