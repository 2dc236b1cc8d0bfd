from decimal import Decimal

import httpx
import pytest

from dormchef_recipes.app.services import recipe_importer
from dormchef_recipes.app.services.url_parsing.errors import (
    ExtractionFailed,
    FetchFailed,
    InvalidUrlFormat,
)

PANCAKE_PAGE = """
<html>
  <head>
    <script type="application/ld+json">
    {
      "@context": "https://schema.org",
      "@type": "Recipe",
      "name": "Pancakes",
      "recipeIngredient": ["1 1/2 cups flour", "2 eggs"],
      "recipeInstructions": ["Mix.", "Bake."],
      "totalTime": "PT30M"
    }
    </script>
  </head>
  <body><h1>Pancakes</h1></body>
</html>
"""


@pytest.mark.asyncio
async def test_import_recipe_from_url(mock_transport):
    mock_transport(lambda request: httpx.Response(200, text=PANCAKE_PAGE))

    recipe = await recipe_importer.import_recipe_from_url("https://example.com/pancakes")
    assert recipe.source_url == "https://example.com/pancakes"
    assert recipe.canonical_url is None
    assert recipe.title == "Pancakes"
    assert recipe.total_time_minutes == 30
    assert len(recipe.ingredients) == 2
    first = recipe.ingredients[0]
    assert first.quantity == Decimal("1.5")
    assert first.unit == "cup"
    assert first.item == "flour"
    assert recipe.instructions == ["Mix.", "Bake."]


@pytest.mark.asyncio
async def test_import_rejects_invalid_url_without_fetching(monkeypatch):
    async def fail_fetch(url):
        raise AssertionError("fetch should not be called")

    monkeypatch.setattr(recipe_importer, "fetch_html", fail_fetch)
    with pytest.raises(InvalidUrlFormat):
        await recipe_importer.import_recipe_from_url("www.example.com/pancakes")


@pytest.mark.asyncio
async def test_import_page_without_recipe(mock_transport):
    mock_transport(lambda request: httpx.Response(200, text="<html><body>Blog post</body></html>"))
    with pytest.raises(ExtractionFailed):
        await recipe_importer.import_recipe_from_url("https://example.com/blog")


@pytest.mark.asyncio
async def test_import_propagates_fetch_failure(mock_transport):
    mock_transport(lambda request: httpx.Response(503))
    with pytest.raises(FetchFailed) as excinfo:
        await recipe_importer.import_recipe_from_url("https://example.com/pancakes")
    assert excinfo.value.status == 503
