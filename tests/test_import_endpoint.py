from decimal import Decimal

import pytest

from dormchef_recipes.app.services import recipe_importer
from dormchef_recipes.app.services.url_parsing.errors import (
    ExtractionFailed,
    FetchFailed,
    FetchTimeout,
    InvalidUrlFormat,
    NetworkError,
)
from dormchef_recipes.app.services.url_parsing.models import ExtractedRecipe, ParsedIngredient


def _extracted_recipe(url: str = "https://example.com/recipe") -> ExtractedRecipe:
    return ExtractedRecipe(
        source_url=url,
        title="Imported Recipe",
        total_time_minutes=25,
        yield_="4",
        ingredients=[
            ParsedIngredient(raw="1 cup flour", quantity=Decimal("1"), unit="cup", item="flour")
        ],
        instructions=["Mix well"],
    )


@pytest.fixture
def fake_import(monkeypatch):
    calls = []

    async def fake(url: str):
        calls.append(url)
        return _extracted_recipe(url)

    monkeypatch.setattr(recipe_importer, "import_recipe_from_url", fake)
    return calls


def test_preview_returns_recipe_without_saving(client, user_token, recipe_store, fake_import):
    response = client.get(
        "/recipes/import/url",
        params={"url": "https://example.com/recipe"},
        headers={"Authorization": f"Bearer {user_token}"},
    )
    assert response.status_code == 200
    recipe = response.json()["recipe"]
    assert recipe["title"] == "Imported Recipe"
    assert recipe["sourceUrl"] == "https://example.com/recipe"
    assert recipe["totalTimeMinutes"] == 25
    assert recipe["yield"] == "4"
    assert recipe["ingredients"][0] == {"raw": "1 cup flour", "quantity": 1.0, "unit": "cup", "item": "flour"}
    assert recipe_store.save(1, _extracted_recipe()).already_imported is False


def test_save_is_idempotent_per_user(client, user_token, other_user_token, fake_import):
    first = client.post(
        "/recipes/import/url",
        json={"url": "https://example.com/recipe"},
        headers={"Authorization": f"Bearer {user_token}"},
    )
    assert first.status_code == 200
    body = first.json()
    assert body["note"] is None
    assert body["recipe"]["title"] == "Imported Recipe"

    again = client.post(
        "/recipes/import/url",
        json={"url": "https://example.com/recipe"},
        headers={"Authorization": f"Bearer {user_token}"},
    )
    assert again.status_code == 200
    assert again.json()["id"] == body["id"]
    assert again.json()["note"] == "You have already imported this recipe"

    other = client.post(
        "/recipes/import/url",
        json={"url": "https://example.com/recipe"},
        headers={"Authorization": f"Bearer {other_user_token}"},
    )
    assert other.status_code == 200
    assert other.json()["id"] != body["id"]
    assert other.json()["note"] is None


def test_missing_url(client, user_token, fake_import):
    response = client.get("/recipes/import/url", headers={"Authorization": f"Bearer {user_token}"})
    assert response.status_code == 422
    assert response.json()["detail"]["error_code"] == "missing_url"

    response = client.post("/recipes/import/url", json={}, headers={"Authorization": f"Bearer {user_token}"})
    assert response.status_code == 422
    assert fake_import == []


def test_import_requires_auth(client, fake_import):
    response = client.get("/recipes/import/url", params={"url": "https://example.com/recipe"})
    assert response.status_code in (401, 403)
    assert fake_import == []


@pytest.mark.parametrize(
    "error,status_code,error_code",
    [
        (InvalidUrlFormat("bad"), 422, "invalid_url"),
        (NetworkError("dns"), 502, "network_error"),
        (FetchTimeout(), 504, "fetch_timeout"),
        (FetchFailed(404, "Not Found"), 502, "fetch_failed"),
        (ExtractionFailed(), 422, "extraction_failed"),
    ],
)
def test_import_errors_map_to_distinct_responses(
    monkeypatch, client, user_token, recipe_store, error, status_code, error_code
):
    async def failing(url: str):
        raise error

    monkeypatch.setattr(recipe_importer, "import_recipe_from_url", failing)

    response = client.post(
        "/recipes/import/url",
        json={"url": "https://example.com/recipe"},
        headers={"Authorization": f"Bearer {user_token}"},
    )
    assert response.status_code == status_code
    body = response.json()
    assert body["error_code"] == error_code
    assert body["message"] == error.message
    assert recipe_store.save(1, _extracted_recipe()).already_imported is False


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
